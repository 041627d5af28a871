from wordsim.wordsim_classes import GlossPair
from wordsim.wordsim_utils import Link

#: (link of the first concept, link of the second concept) for every gloss
#: pair, in the order they are produced. None stands for the concept's own
#: definition, Link.SYNSET for its words.
LINK_PAIRS = [
    (None, None),
    (None, Link.HYPERNYM),
    (None, Link.HYPONYM),
    (None, Link.MERONYM),
    (None, Link.HOLONYM),

    (Link.HYPERNYM, None),
    (Link.HYPERNYM, Link.HYPERNYM),
    (Link.HYPERNYM, Link.HYPONYM),
    (Link.HYPERNYM, Link.MERONYM),
    (Link.HYPERNYM, Link.HOLONYM),

    (Link.HYPONYM, None),
    (Link.HYPONYM, Link.HYPERNYM),
    (Link.HYPONYM, Link.HYPONYM),
    (Link.HYPONYM, Link.MERONYM),
    (Link.HYPONYM, Link.HOLONYM),

    (Link.MERONYM, None),
    (Link.MERONYM, Link.HYPERNYM),
    (Link.MERONYM, Link.HYPONYM),
    (Link.MERONYM, Link.MERONYM),
    (Link.MERONYM, Link.HOLONYM),

    (Link.SYNSET, None),
    (Link.SYNSET, Link.HYPERNYM),
    (Link.SYNSET, Link.HYPONYM),
    (Link.SYNSET, Link.MERONYM),
    (Link.SYNSET, Link.HOLONYM),
]


def _label(link):
    return link.link_name if link is not None else ' '


class GlossFinder(object):
    """
    Builds the glosses compared by gloss-overlap measures: for every
    pair in ``LINK_PAIRS``, the glosses of the first concept through the
    first link against those of the second concept through the second.
    """

    def __init__(self, db, weights=None):
        """
        :param weights: Optional dict mapping a ``(link1, link2)`` pair of
            ``LINK_PAIRS`` to the weight of its gloss pair; pairs not
            listed weigh 1.0.
        """
        self._db = db
        self._weights = dict(weights) if weights else {}
        unknown = set(self._weights) - set(LINK_PAIRS)
        if unknown:
            raise ValueError('Unknown link pairs: %s' % sorted(
                '%s-%s' % (_label(l1), _label(l2)) for l1, l2 in unknown))

    def super_glosses(self, concept1, concept2):
        return [GlossPair(self._db.gloss(concept1, link1),
                          self._db.gloss(concept2, link2),
                          _label(link1), _label(link2),
                          self._weights.get((link1, link2), 1.0))
                for link1, link2 in LINK_PAIRS]
