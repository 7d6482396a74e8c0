"""Unit tests for CatalogService."""

import pytest

from joinery.application import CatalogService


def _service() -> CatalogService:
    return CatalogService()


def test_artist_genres_and_genre_artists() -> None:
    service = _service()
    jay = service.new_artist("Jay-Z")
    adele = service.new_artist("Adele")
    rap = service.new_genre("rap")
    pop = service.new_genre("pop")
    service.new_song("99 Problems", jay, rap)
    service.new_song("Hello", adele, pop)
    service.new_song("Empire State of Mind", jay, pop)

    assert service.artist_genres(jay) == [rap, pop]
    assert service.genre_artists(pop) == [adele, jay]
    assert [s.name for s in service.artist_songs(jay)] == ["99 Problems", "Empire State of Mind"]
    assert [s.name for s in service.genre_songs(rap)] == ["99 Problems"]


def test_repeated_genre_kept_unless_distinct() -> None:
    service = _service()
    jay = service.new_artist("Jay-Z")
    rap = service.new_genre("rap")
    service.new_song("99 Problems", jay, rap)
    service.new_song("Dirt off Your Shoulder", jay, rap)

    assert service.artist_genres(jay) == [rap, rap]
    assert service.artist_genres(jay, distinct=True) == [rap]
    assert service.genre_artists(rap, distinct=True) == [jay]


def test_owning_side_song_creation() -> None:
    service = _service()
    jay = service.new_artist("Jay-Z")
    rap = service.new_genre("rap")

    from_artist = service.artist_new_song(jay, "99 Problems", rap)
    from_genre = service.genre_new_song(rap, "Izzo", jay)

    assert from_artist.artist is jay and from_artist.genre is rap
    assert from_genre.artist is jay and from_genre.genre is rap
    assert service.all_songs() == [from_artist, from_genre]


def test_song_requires_artist_and_genre() -> None:
    service = _service()
    jay = service.new_artist("Jay-Z")
    rap = service.new_genre("rap")

    with pytest.raises(ValueError, match="Artist"):
        service.new_song("Orphan", None, rap)
    with pytest.raises(ValueError, match="Genre"):
        service.artist_new_song(jay, "Orphan", None)
    assert service.all_songs() == []


def test_all_accessors_keep_creation_order() -> None:
    service = _service()
    a = service.new_artist("A")
    b = service.new_artist("B")
    g = service.new_genre("G")
    assert service.all_artists() == [a, b]
    assert service.all_genres() == [g]


def test_lookup_by_id() -> None:
    service = _service()
    jay = service.new_artist("Jay-Z")
    rap = service.new_genre("rap")
    song = service.new_song("Izzo", jay, rap)

    assert service.get_artist(jay.id) is jay
    assert service.get_genre(rap.id) is rap
    assert service.get_song(song.id) is song
    assert service.get_song("nonexistent-uuid") is None
