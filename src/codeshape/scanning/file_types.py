"""File type taxonomy: a fixed lookup from file name / extension to a tag."""

from enum import Enum
from pathlib import PurePosixPath


class FileType(str, Enum):
    """Stable string tags for every file the scanner records."""

    CONFIG = "config"
    DOCUMENTATION = "documentation"
    JAVASCRIPT = "javascript"
    JAVASCRIPT_REACT = "javascript-react"
    TYPESCRIPT = "typescript"
    TYPESCRIPT_REACT = "typescript-react"
    PYTHON = "python"
    RUBY = "ruby"
    JAVA = "java"
    GO = "go"
    CSHARP = "csharp"
    PHP = "php"
    SWIFT = "swift"
    KOTLIN = "kotlin"
    RUST = "rust"
    DART = "dart"
    C = "c"
    CPP = "cpp"
    C_HEADER = "c-header"
    CPP_HEADER = "cpp-header"
    HTML = "html"
    STYLESHEET = "stylesheet"
    IMAGE = "image"
    FONT = "font"
    JSON = "json"
    XML = "xml"
    YAML = "yaml"
    TOML = "toml"
    TABULAR_DATA = "tabular-data"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


CONFIG_FILE_NAMES = frozenset(
    {
        "package.json",
        "package-lock.json",
        "yarn.lock",
        "tsconfig.json",
        "jsconfig.json",
        ".prettierrc",
        ".eslintrc",
        ".babelrc",
        "webpack.config.js",
        "babel.config.js",
        "jest.config.js",
        "vite.config.js",
        "rollup.config.js",
    }
)

DOCUMENTATION_FILE_NAMES = frozenset(
    {
        "readme.md",
        "license",
        "license.md",
        "license.txt",
        "contributing.md",
        "changelog.md",
    }
)

EXTENSION_TYPES: dict[str, FileType] = {
    # Source code
    ".js": FileType.JAVASCRIPT,
    ".jsx": FileType.JAVASCRIPT_REACT,
    ".ts": FileType.TYPESCRIPT,
    ".tsx": FileType.TYPESCRIPT_REACT,
    ".py": FileType.PYTHON,
    ".rb": FileType.RUBY,
    ".java": FileType.JAVA,
    ".go": FileType.GO,
    ".cs": FileType.CSHARP,
    ".php": FileType.PHP,
    ".swift": FileType.SWIFT,
    ".kt": FileType.KOTLIN,
    ".rs": FileType.RUST,
    ".dart": FileType.DART,
    ".c": FileType.C,
    ".cpp": FileType.CPP,
    ".h": FileType.C_HEADER,
    ".hpp": FileType.CPP_HEADER,
    # Web assets
    ".html": FileType.HTML,
    ".htm": FileType.HTML,
    ".css": FileType.STYLESHEET,
    ".scss": FileType.STYLESHEET,
    ".sass": FileType.STYLESHEET,
    ".less": FileType.STYLESHEET,
    ".svg": FileType.IMAGE,
    ".png": FileType.IMAGE,
    ".jpg": FileType.IMAGE,
    ".jpeg": FileType.IMAGE,
    ".gif": FileType.IMAGE,
    ".webp": FileType.IMAGE,
    ".woff": FileType.FONT,
    ".woff2": FileType.FONT,
    ".ttf": FileType.FONT,
    ".eot": FileType.FONT,
    ".otf": FileType.FONT,
    # Data formats
    ".json": FileType.JSON,
    ".jsonc": FileType.JSON,
    ".xml": FileType.XML,
    ".xsl": FileType.XML,
    ".yml": FileType.YAML,
    ".yaml": FileType.YAML,
    ".toml": FileType.TOML,
    ".csv": FileType.TABULAR_DATA,
    ".tsv": FileType.TABULAR_DATA,
}


def classify_file_type(file_name: str) -> FileType:
    """Classify a file by its base name.

    Named config files win over their extension (``package.json`` is
    config, not json), and any ``.md`` file is documentation.
    """
    name = PurePosixPath(file_name).name.lower()
    ext = PurePosixPath(name).suffix

    if name in CONFIG_FILE_NAMES:
        return FileType.CONFIG
    if name in DOCUMENTATION_FILE_NAMES or ext == ".md":
        return FileType.DOCUMENTATION

    return EXTENSION_TYPES.get(ext, FileType.UNKNOWN)
