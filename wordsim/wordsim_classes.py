from wordsim.wordsim_utils import POS

######################################################################
## Data Classes
######################################################################


class Concept(object):
    """
    A synset as seen by the relatedness measures.

    Concept attributes:

    - synset_id: The opaque identifier issued by the lexical database.
      Only the database that issued it may interpret it.
    - pos: The part of speech of the synset, a ``POS`` member (or None
      when the database did not report one).
    - lemma: The word the concept was looked up by, if any. Kept for
      tracing only.

    Two concepts are equal when their synset identifiers are equal,
    whatever their lemma.
    """

    __slots__ = ['_synset_id', '_pos', '_lemma']

    def __init__(self, synset_id, pos=None, lemma=None):
        if pos is not None and not isinstance(pos, POS):
            pos = POS.from_tag(pos)
        object.__setattr__(self, '_synset_id', synset_id)
        object.__setattr__(self, '_pos', pos)
        object.__setattr__(self, '_lemma', lemma)

    @property
    def synset_id(self):
        return self._synset_id

    @property
    def pos(self):
        return self._pos

    @property
    def lemma(self):
        return self._lemma

    def with_pos(self, pos):
        """Return a copy of this concept tagged with ``pos``."""
        return Concept(self._synset_id, pos, self._lemma)

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % type(self).__name__)

    def __hash__(self):
        return hash(self._synset_id)

    def __eq__(self, other):
        if not isinstance(other, Concept):
            return NotImplemented
        return self._synset_id == other._synset_id

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self):
        return "%s('%s')" % (type(self).__name__, self._synset_id)

    def __str__(self):
        return str(self._synset_id)


class Relatedness(object):
    """
    The outcome of scoring two concepts.

    - score: The relatedness score, within the bounds of the measure
      that produced it.
    - trace: A human readable explanation of how the score was reached,
      or None when tracing is disabled.
    - error: A diagnostic for inputs that could not be scored.
    """

    __slots__ = ['score', 'trace', 'error']

    def __init__(self, score, trace=None, error=None):
        self.score = score
        self.trace = trace
        self.error = error

    def __repr__(self):
        return '%s(score=%r, error=%r)' % (type(self).__name__, self.score,
                                           self.error)


class Subsumer(object):
    """
    A candidate lowest common subsumer and the value it was ranked by:
    its information content, or its depth for depth-ranked subsumers.
    """

    __slots__ = ['concept', 'ic']

    def __init__(self, concept, ic):
        self.concept = concept
        self.ic = ic

    def __iter__(self):
        return iter((self.concept, self.ic))

    def __eq__(self, other):
        if not isinstance(other, Subsumer):
            return NotImplemented
        return self.concept == other.concept and self.ic == other.ic

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self.concept, self.ic))

    def __repr__(self):
        return '%s(%r, %r)' % (type(self).__name__, self.concept, self.ic)


class GlossPair(object):
    """
    The glosses of two concepts gathered through a pair of links, as
    consumed by gloss-overlap measures.

    - gloss1, gloss2: Normalised token lists.
    - link1, link2: Labels of the links the glosses were gathered through
      (a single space for the concept's own definition).
    - weight: How much overlaps found in this pair count.
    """

    __slots__ = ['gloss1', 'gloss2', 'link1', 'link2', 'weight']

    def __init__(self, gloss1, gloss2, link1, link2, weight=1.0):
        self.gloss1 = gloss1
        self.gloss2 = gloss2
        self.link1 = link1
        self.link2 = link2
        self.weight = weight

    def __repr__(self):
        return '%s(%r, %r, weight=%r)' % (type(self).__name__, self.link1,
                                          self.link2, self.weight)
