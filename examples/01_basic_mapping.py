"""
Example 01: Basic Mapping

This example demonstrates registering mappers and mapping single objects
and lists with ObjectMapper.
"""

from dataclasses import dataclass, field

from custom_mapper import MappingRegistry, ObjectMapper


@dataclass
class Book:
    id: int
    title: str


@dataclass
class Author:
    id: int
    name: str
    books: list = field(default_factory=list)


@dataclass
class AuthorDTO:
    id: int
    name: str
    book_titles: list = field(default_factory=list)


class AuthorMapper:
    """Mapper object implementing the SyncMapper protocol."""

    def map(self, source, include_children):
        titles = [b.title for b in source.books] if include_children else []
        return AuthorDTO(id=source.id, name=source.name, book_titles=titles)


def main():
    registry = MappingRegistry()
    mapper = ObjectMapper(registry)
    mapper.register(Author, AuthorDTO, AuthorMapper())

    author = Author(id=1, name="Ursula", books=[Book(1, "The Dispossessed")])

    print("=== Basic Mapping ===\n")

    print("1. Single object:")
    print(f"   {mapper.map(author, AuthorDTO)}\n")

    print("2. Without child entities:")
    print(f"   {mapper.map(author, AuthorDTO, include_children=False)}\n")

    print("3. None maps to None:")
    print(f"   {mapper.map(None, AuthorDTO)}\n")

    print("4. List mapping (None entries are skipped):")
    authors = [author, None, Author(id=2, name="Octavia")]
    for dto in mapper.map_many(authors, AuthorDTO):
        print(f"   - {dto.name}")


if __name__ == "__main__":
    main()
