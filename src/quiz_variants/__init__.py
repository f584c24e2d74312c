"""Top-level package for Quiz Variants.

Provides subpackages:
- quiz_variants.core – question/header models, validation, serialization
- quiz_variants.builder – variant engine, page layout and PDF output
"""

def _get_version() -> str:
    """Get version from installed package metadata."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("quiz-variants")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
