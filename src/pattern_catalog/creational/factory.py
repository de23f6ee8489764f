"""Factory: pick a parser implementation from a file name."""

from __future__ import annotations

from typing import Protocol

from ..errors import UnsupportedFileType
from ..registry import scenario


class FileParser(Protocol):
    def parse(self) -> None: ...


class XmlFileParser:
    def parse(self) -> None:
        print("XmlFileParser")


class JsonFileParser:
    def parse(self) -> None:
        print("JsonFileParser")


class StandardFileParserFactory:
    _parsers: dict[str, type] = {
        "xml": XmlFileParser,
        "json": JsonFileParser,
    }

    def create_from_file_name(self, file_name: str) -> FileParser:
        extension = file_name.rsplit(".", 1)[-1]
        try:
            parser_cls = self._parsers[extension]
        except KeyError:
            raise UnsupportedFileType(file_name) from None
        return parser_cls()


@scenario("factory", category="creational", title="Factory")
def main() -> None:
    parser_factory = StandardFileParserFactory()
    for file_name in ("filename.json", "filename.xml", "filename.txt"):
        try:
            parser = parser_factory.create_from_file_name(file_name)
        except UnsupportedFileType as exc:
            print(exc)
            continue
        parser.parse()


if __name__ == "__main__":
    main()

### OUTPUT ###
# JsonFileParser
# XmlFileParser
# I don't know how to deal with filename.txt.
