"""Pathmapper — match, extract and rebuild paths from bracket patterns.

Patterns mix literal segments with placeholders::

    /pages/[slug].json            one segment, bound to "slug"
    /pages/[...page].page.json    one or more segments, bound to "page"

Basic usage::

    from pathmapper import PathMapper

    mapper = PathMapper("/pages/[...page].page.json")
    mapper.test("/pages/products/shoes.page.json")   # True
    mapper.match("/pages/products/shoes.page.json")  # {"page": "products/shoes"}
    mapper.stringify({"page": "about-us"})           # "/pages/about-us.page.json"

Many patterns::

    from pathmapper import MapperTable

    table = MapperTable()
    table.add("/pages/[...page].page.json", target=render_page)
    table.compile()
    found = table.resolve("/pages/about-us.page.json")
"""

__version__ = "0.1.0"
__all__ = [
    "CompiledPattern",
    "ConfigurationError",
    "MapperConfig",
    "MapperTable",
    "MatchFailure",
    "MultiPart",
    "PathMapper",
    "PathMapperError",
    "SinglePart",
    "StaticPart",
    "TableMatch",
    "ToLessParamsFailure",
    "UnmatchedPath",
    "compile_pattern",
    "escape_for_regex",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "CompiledPattern": "pathmapper.compiler.parts",
    "ConfigurationError": "pathmapper.errors",
    "MapperConfig": "pathmapper.config",
    "MapperTable": "pathmapper.table",
    "MatchFailure": "pathmapper.errors",
    "MultiPart": "pathmapper.compiler.parts",
    "PathMapper": "pathmapper.mapper",
    "PathMapperError": "pathmapper.errors",
    "SinglePart": "pathmapper.compiler.parts",
    "StaticPart": "pathmapper.compiler.parts",
    "TableMatch": "pathmapper.table",
    "ToLessParamsFailure": "pathmapper.errors",
    "UnmatchedPath": "pathmapper.errors",
    "compile_pattern": "pathmapper.compiler.compiler",
    "escape_for_regex": "pathmapper.compiler.escape",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import pathmapper`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
