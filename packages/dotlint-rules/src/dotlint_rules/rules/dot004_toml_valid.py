import tomllib

from .structured import StructuredDataRule


class TomlFilesValidRule(StructuredDataRule):
    CODE = "DOT004"
    NAME = "TOML files are valid"
    LABEL = "TOML"
    EXTENSIONS = (".toml",)

    def parses(self, text: str) -> bool:
        try:
            tomllib.loads(text)
        except tomllib.TOMLDecodeError:
            return False
        return True
