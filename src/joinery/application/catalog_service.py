"""Artists, genres, and the songs that join them."""

import logging

from joinery.application.associations import joins_for, related
from joinery.application.ports import Registry
from joinery.domain import Artist, Genre, Song
from joinery.infrastructure import InMemoryRegistry

logger = logging.getLogger(__name__)


class CatalogService:
    """Artist has many genres through songs; genre has many artists through songs."""

    def __init__(
        self,
        *,
        artists: Registry[Artist] | None = None,
        genres: Registry[Genre] | None = None,
        songs: Registry[Song] | None = None,
    ) -> None:
        self._artists = artists if artists is not None else InMemoryRegistry("artist")
        self._genres = genres if genres is not None else InMemoryRegistry("genre")
        self._songs = songs if songs is not None else InMemoryRegistry("song")

    def new_artist(self, name: str) -> Artist:
        artist = Artist(name=name)
        self._artists.register(artist)
        return artist

    def new_genre(self, name: str) -> Genre:
        genre = Genre(name=name)
        self._genres.register(genre)
        return genre

    def new_song(self, name: str, artist: Artist, genre: Genre) -> Song:
        song = Song(name=name, artist=artist, genre=genre)
        self._songs.register(song)
        logger.debug("Song %s: artist=%s genre=%s", song.id, artist.id, genre.id)
        return song

    def artist_new_song(self, artist: Artist, name: str, genre: Genre) -> Song:
        return self.new_song(name, artist, genre)

    def genre_new_song(self, genre: Genre, name: str, artist: Artist) -> Song:
        return self.new_song(name, artist, genre)

    def all_artists(self) -> list[Artist]:
        return self._artists.all()

    def all_genres(self) -> list[Genre]:
        return self._genres.all()

    def all_songs(self) -> list[Song]:
        return self._songs.all()

    def get_artist(self, artist_id: str) -> Artist | None:
        return self._artists.get_by_id(artist_id)

    def get_genre(self, genre_id: str) -> Genre | None:
        return self._genres.get_by_id(genre_id)

    def get_song(self, song_id: str) -> Song | None:
        return self._songs.get_by_id(song_id)

    def artist_songs(self, artist: Artist) -> list[Song]:
        return joins_for(self._songs, artist, "artist")

    def artist_genres(self, artist: Artist, *, distinct: bool = False) -> list[Genre]:
        return related(self._songs, artist, "artist", "genre", distinct=distinct)

    def genre_songs(self, genre: Genre) -> list[Song]:
        return joins_for(self._songs, genre, "genre")

    def genre_artists(self, genre: Genre, *, distinct: bool = False) -> list[Artist]:
        return related(self._songs, genre, "genre", "artist", distinct=distinct)
