import logging
import sys
import threading
from enum import Enum

logger = logging.getLogger(__name__)

######################################################################
## Constants
######################################################################

#: Upper bound for unbounded measures (Jiang-Conrath, Resnik)
_INF = sys.float_info.max

#: Returned by the IC finder when a probability cannot be estimated
UNDEFINED_IC = 0.0

#: Added to the root frequency when an IC distance collapses to zero
ROOT_SMOOTHING = 0.01

#: Separator between a word and its part-of-speech tag, e.g. "dog#n"
POS_SEPARATOR = '#'


class POS(Enum):
    """The parts of speech a concept can belong to."""

    NOUN = 'n'
    VERB = 'v'
    ADJECTIVE = 'a'
    ADVERB = 'r'

    @property
    def tag(self):
        return self.value

    @classmethod
    def from_tag(cls, tag):
        """Resolve an external tag such as ``'n'``; unknown tags give None."""
        if tag is None:
            return None
        tag = tag.strip().lower()
        if tag == 's':
            # adjective satellites share the adjective index
            return cls.ADJECTIVE
        for pos in cls:
            if pos.value == tag:
                return pos
        return None

    def __str__(self):
        return self.value


POS_LIST = [POS.NOUN, POS.VERB, POS.ADJECTIVE, POS.ADVERB]


class Link(Enum):
    """
    Taxonomy relations used to select related concepts or glosses.

    Each member carries the display name used in gloss labels and the
    WordNet pointer symbol of the relation (see
    http://wordnet.princeton.edu/man/wninput.5WN.html#sect3).
    The aggregate MERONYM and HOLONYM links have no symbol of their own
    and expand to their member, substance and part variants.
    """

    SYNSET = ('synset', None)
    HYPERNYM = ('hypernym', '@')
    HYPONYM = ('hyponym', '~')
    MERONYM_MEMBER = ('meronym_member', '%m')
    MERONYM_SUBSTANCE = ('meronym_substance', '%s')
    MERONYM_PART = ('meronym_part', '%p')
    MERONYM = ('meronym', None)
    HOLONYM_MEMBER = ('holonym_member', '#m')
    HOLONYM_SUBSTANCE = ('holonym_substance', '#s')
    HOLONYM_PART = ('holonym_part', '#p')
    HOLONYM = ('holonym', None)

    def __init__(self, link_name, symbol):
        self.link_name = link_name
        self.symbol = symbol

    @property
    def variants(self):
        """The concrete links an aggregate link stands for."""
        if self is Link.MERONYM:
            return (Link.MERONYM_MEMBER, Link.MERONYM_SUBSTANCE,
                    Link.MERONYM_PART)
        if self is Link.HOLONYM:
            return (Link.HOLONYM_MEMBER, Link.HOLONYM_SUBSTANCE,
                    Link.HOLONYM_PART)
        return (self,)

    def __str__(self):
        return self.link_name


######################################################################
## Helpers
######################################################################

def parse_word(word):
    """
    Split a ``word#tag`` string into its lemma and tag.

    :return: ``(lemma, tag)`` where ``tag`` is None when the word carries
        no ``#`` suffix. The tag is returned unresolved so callers can
        tell an unknown tag apart from a missing one.
    """
    if POS_SEPARATOR not in word:
        return word, None
    lemma, tag = word.rsplit(POS_SEPARATOR, 1)
    return lemma, tag


class Cache(object):
    """
    A process-lifetime memo table that is safe to share between threads.

    Values must be pure functions of their key: two threads racing on
    the same miss may both compute the value, and the first stored one
    wins for everybody.
    """

    def __init__(self, name='cache'):
        self.name = name
        self._data = {}
        self._lock = threading.RLock()

    def get(self, key, default=None):
        with self._lock:
            return self._data.get(key, default)

    def put_if_absent(self, key, value):
        """Store ``value`` unless ``key`` is already present; return the stored value."""
        with self._lock:
            return self._data.setdefault(key, value)

    def get_or_compute(self, key, compute):
        with self._lock:
            if key in self._data:
                return self._data[key]
        # computed outside the lock; writes are idempotent
        value = compute()
        logger.debug('%s miss for %r', self.name, key)
        return self.put_if_absent(key, value)

    def __contains__(self, key):
        with self._lock:
            return key in self._data

    def __len__(self):
        with self._lock:
            return len(self._data)

    def __repr__(self):
        return '%s(%r, size=%d)' % (type(self).__name__, self.name, len(self))


class WordNetError(Exception):
    """An exception class for wordnet-related errors."""
