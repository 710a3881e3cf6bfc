"""
Domain models — Pydantic types for the library directory.

All models are re-exported here for convenient access:

    from devlibguide.core.models import LibraryRecord, TagTaxonomy, FilterQuery
"""

from devlibguide.core.models.library import CatalogError, LanguageInfo, LibraryRecord
from devlibguide.core.models.problem import Problem, TestCase
from devlibguide.core.models.query import FilterQuery
from devlibguide.core.models.taxonomy import FAMILY_NAMES, TagTaxonomy, TaxonomyError
from devlibguide.core.models.tutorial import CodeExample, Tutorial

__all__ = [
    # taxonomy.py
    "FAMILY_NAMES",
    # library.py
    "CatalogError",
    # tutorial.py
    "CodeExample",
    # query.py
    "FilterQuery",
    # library.py
    "LanguageInfo",
    "LibraryRecord",
    # problem.py
    "Problem",
    "TagTaxonomy",
    "TaxonomyError",
    "TestCase",
    # tutorial.py
    "Tutorial",
]
