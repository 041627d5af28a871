import logging
import math

from wordsim.wordsim_utils import Cache, UNDEFINED_IC

logger = logging.getLogger(__name__)


class ICFinder(object):
    """
    Information content of concepts, estimated from the synset counts
    reported by the lexical database.

    The frequency of a concept is its own count plus the count of every
    concept below it in the hyponym taxonomy, so a concept is never less
    frequent than any of its descendants. Both frequencies and IC values
    only depend on the loaded taxonomy and are cached for good.
    """

    def __init__(self, path_finder, frequency_cache=None, ic_cache=None):
        self._path_finder = path_finder
        self._db = path_finder.db
        self._frequency_cache = (frequency_cache if frequency_cache is not None
                                 else Cache('frequency'))
        self._ic_cache = ic_cache if ic_cache is not None else Cache('ic')

    def frequency(self, concept):
        """
        :return: The count of ``concept`` aggregated over its hyponym
            closure. A synset reachable through several hyponym paths is
            counted once.
        """
        return self._frequency_cache.get_or_compute(
            concept.synset_id, lambda: self._aggregate_frequency(concept))

    def _aggregate_frequency(self, concept):
        seen = set([concept])
        todo = [concept]
        total = 0.0
        while todo:
            synset = todo.pop()
            total += self._db.synset_frequency(synset)
            for hyponym in self._db.hyponyms(synset):
                if hyponym not in seen:
                    seen.add(hyponym)
                    todo.append(hyponym)
        return total

    def root_frequency(self, concept):
        """Return the frequency of the root of the taxonomy ``concept`` is in."""
        return self.frequency(self._path_finder.root(concept))

    def ic(self, concept):
        """
        Information content, ``-log(frequency(concept) / frequency(root))``.

        :return: A non-negative float growing with specificity, or
            ``UNDEFINED_IC`` when no count was observed for the concept
            or its root (sparse data problem).
        """
        return self._ic_cache.get_or_compute(
            concept.synset_id, lambda: self._information_content(concept))

    def _information_content(self, concept):
        counts = self.frequency(concept)
        if counts <= 0:
            logger.debug('No frequency observed for %s', concept)
            return UNDEFINED_IC
        root_counts = self.root_frequency(concept)
        if root_counts <= 0:
            logger.debug('No frequency observed for the root of %s', concept)
            return UNDEFINED_IC
        return -math.log(counts / root_counts)
