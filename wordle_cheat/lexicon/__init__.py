from .node import DictionaryNode
from .dictionary import Dictionary, initialize, get_dictionary
from .builder import DictionaryBuilder, compile_words

__all__ = [
    "Dictionary", "DictionaryNode", "DictionaryBuilder", "compile_words",
    "initialize", "get_dictionary",
]
