from types import MappingProxyType

UNKNOWN_LANGUAGE = "unknown"

# Extension tags that share a pattern table with a canonical tag.
DEFAULT_LANGUAGE_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "jsx": "js",
        "mjs": "js",
        "cjs": "js",
        "tsx": "ts",
        "mts": "ts",
        "cts": "ts",
        "pyi": "py",
        "pyw": "py",
        "rs": "rust",
        "rb": "ruby",
        "rake": "ruby",
        "gemspec": "ruby",
    }
)
