"""
rlfm: Burrows-Wheeler transform and FM-index backward search.

    >>> import rlfm
    >>> index = rlfm.build("banana")
    >>> index.bwt
    'nnbaaa'
    >>> index.search("ana")
    2
"""
from .errors import ConfigError, EmptyInputError, RlfmError
from .index.bwt_builder import TransformBuilder, build
from .models.index import CharTable, Index, SearchState
from .models.options import BuildOptions, EmptyInputPolicy
from .models.units import Segmentation, split_units
from .parallelization.batch_search import search_batch
from .query.backward_search import search

__all__ = [
    "BuildOptions",
    "CharTable",
    "ConfigError",
    "EmptyInputError",
    "EmptyInputPolicy",
    "Index",
    "RlfmError",
    "SearchState",
    "Segmentation",
    "TransformBuilder",
    "build",
    "search",
    "search_batch",
    "split_units",
]

__version__ = "0.1.0"
