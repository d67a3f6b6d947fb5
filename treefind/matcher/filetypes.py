"""Named groups of file extensions and well known directory names."""

# Version control metadata directories
VCS_DIRECTORIES: frozenset[str] = frozenset(
    {
        ".git",
        ".svn",
        ".hg",
        ".bzr",
        "CVS",
        "_darcs",
    }
)

# Extensions are lowercase and include the leading dot
FILE_TYPES: dict[str, frozenset[str]] = {
    "c": frozenset({".c", ".h"}),
    "cpp": frozenset({".cc", ".cpp", ".cxx", ".hh", ".hpp", ".hxx"}),
    "go": frozenset({".go"}),
    "java": frozenset({".java"}),
    "js": frozenset({".js", ".jsx", ".mjs", ".cjs"}),
    "ts": frozenset({".ts", ".tsx"}),
    "perl": frozenset({".pl", ".pm", ".t"}),
    "python": frozenset({".py", ".pyi", ".pyw"}),
    "ruby": frozenset({".rb", ".erb", ".rake", ".gemspec"}),
    "rust": frozenset({".rs"}),
    "shell": frozenset({".sh", ".bash", ".zsh"}),
    "web": frozenset({".html", ".htm", ".css", ".scss"}),
    "markdown": frozenset({".md", ".markdown"}),
    "yaml": frozenset({".yml", ".yaml"}),
    "image": frozenset({".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tif", ".tiff", ".webp"}),
    "archive": frozenset({".zip", ".tar", ".gz", ".bz2", ".xz", ".7z"}),
    # Build and interpreter byproducts
    "compiled": frozenset({".o", ".a", ".so", ".pyc", ".pyo", ".class"}),
}


def get_file_type_extensions(names: list[str] | tuple[str, ...]) -> frozenset[str]:
    """Return the union of extensions for the given file type names."""
    unknown = [name for name in names if name not in FILE_TYPES]
    if unknown:
        raise ValueError(f"Unknown file type: {unknown[0]}. Available: {sorted(FILE_TYPES)}")

    extensions: set[str] = set()
    for name in names:
        extensions |= FILE_TYPES[name]
    return frozenset(extensions)


def normalize_extension(extension: str) -> str:
    extension = extension.lower()
    if not extension.startswith("."):
        extension = "." + extension
    return extension
