import json

from .structured import StructuredDataRule

COMMENTED_JSON_EXTENSION = ".jsonc"
# Tools whose JSON config tolerates comments and trailing commas
COMMENT_TOLERANT_DIRS = (".config/zed/",)


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant: {name}")


class JsonFilesValidRule(StructuredDataRule):
    CODE = "DOT005"
    NAME = "JSON files are valid"
    LABEL = "JSON"
    EXTENSIONS = (".json", COMMENTED_JSON_EXTENSION)

    def skips(self, path: str) -> bool:
        if path.endswith(COMMENTED_JSON_EXTENSION):
            return True
        anchored = f"/{path}"
        return any(f"/{d}" in anchored for d in COMMENT_TOLERANT_DIRS)

    def parses(self, text: str) -> bool:
        # NaN/Infinity and lone surrogate escapes are not RFC 8259 JSON
        try:
            value = json.loads(text, parse_constant=_reject_constant)
            json.dumps(value, ensure_ascii=False).encode("utf-8")
        except ValueError:
            return False
        return True
