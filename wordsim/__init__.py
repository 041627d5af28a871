"""
Semantic relatedness of WordNet concepts.

    >>> from wordsim import NLTKWordNet, WuPalmer
    >>> db = NLTKWordNet()  # doctest: +SKIP
    >>> WuPalmer(db).calc_relatedness_of_words('dog#n', 'cat#n')  # doctest: +SKIP
"""

from wordsim.config import WordSimConfiguration
from wordsim.wordsim_utils import (Cache, Link, POS, POS_LIST, UNDEFINED_IC,
                                   WordNetError, parse_word)
from wordsim.wordsim_classes import Concept, GlossPair, Relatedness, Subsumer
from wordsim.lexical_db import LexicalDatabase, NLTKWordNet, normalize_gloss
from wordsim.ic_finder import ICFinder
from wordsim.path_finder import PathFinder
from wordsim.calculator import RelatednessCalculator
from wordsim.similarity import JiangConrath, Lin, Path, Resnik, WuPalmer
from wordsim.gloss_finder import LINK_PAIRS, GlossFinder
