import logging

from wordsim.ic_finder import ICFinder
from wordsim.wordsim_classes import Concept, Subsumer
from wordsim.wordsim_utils import Cache

logger = logging.getLogger(__name__)


class PathFinder(object):
    """
    Walks the hypernym taxonomy of a lexical database.

    The hypernym relation is a DAG: a concept may have several direct
    hypernyms, so every walk keeps the set of synsets already seen
    instead of assuming a single parent. The seen set also stops walks
    on malformed data where the relation loops.
    """

    def __init__(self, db, ic_finder=None, depth_cache=None):
        self.db = db
        self._ic_finder = ic_finder
        self._depth_cache = depth_cache if depth_cache is not None else Cache('depth')

    @property
    def ic_finder(self):
        if self._ic_finder is None:
            self._ic_finder = ICFinder(self)
        return self._ic_finder

    def ancestors(self, concept):
        """
        Breadth-first hypernym closure of ``concept``.

        :return: A dict mapping every ancestor, ``concept`` included, to
            the number of edges on its shortest path from ``concept``.
            Insertion order is breadth-first, nearest ancestors first.
        """
        distances = {concept: 0}
        todo = [concept]
        distance = 0
        while todo:
            distance += 1
            todo_next = []
            for synset in todo:
                for hypernym in self.db.hypernyms(synset):
                    if hypernym not in distances:
                        distances[hypernym] = distance
                        todo_next.append(hypernym)
            todo = todo_next
        return distances

    def common_subsumers(self, concept1, concept2):
        """
        Find all synsets that subsume both concepts, including either
        concept itself when it is an ancestor of the other.
        """
        others = self.ancestors(concept2)
        return [synset for synset in self.ancestors(concept1)
                if synset in others]

    def lowest_common_subsumers(self, concept1, concept2):
        """
        Get the common subsumers with the highest information content.

        Several subsumers may share the maximum; all of them are
        returned, nearest to ``concept1`` first. Callers scoring with a
        single subsumer use the first one.

        :return: A list of ``Subsumer``, empty when the concepts share no
            ancestor (different parts of speech or disconnected
            taxonomies).
        """
        ic = self.ic_finder.ic
        return self._best_subsumers(concept1, concept2, ic)

    def lowest_common_subsumers_by_depth(self, concept1, concept2):
        """
        Get the deepest common subsumers, for measures that must not
        depend on corpus frequencies. The ``ic`` slot of every returned
        ``Subsumer`` holds its depth.
        """
        return self._best_subsumers(concept1, concept2, self.depth)

    def _best_subsumers(self, concept1, concept2, rank):
        candidates = [Subsumer(synset, rank(synset))
                      for synset in self.common_subsumers(concept1, concept2)]
        if not candidates:
            return []
        best = max(subsumer.ic for subsumer in candidates)
        return [subsumer for subsumer in candidates if subsumer.ic == best]

    def root(self, concept):
        """
        Follow the first hypernym of ``concept`` (a ``Concept`` or a
        synset identifier) upward until there is none.

        On a hypernym cycle the walk stops and the last concept reached
        is returned.
        """
        if not isinstance(concept, Concept):
            concept = Concept(concept)
        seen = set()
        current = concept
        while True:
            seen.add(current)
            hypernyms = self.db.hypernyms(current)
            if not hypernyms:
                return current
            if hypernyms[0] in seen:
                logger.warning('Hypernym cycle above %s, stopping at %s',
                               concept, current)
                return current
            current = hypernyms[0]

    def depth(self, concept):
        """
        :return: The number of synsets on the shortest hypernym path from
            a root down to ``concept``; a root has depth 1.
        """
        return self._depth_cache.get_or_compute(
            concept.synset_id, lambda: self._min_depth(concept))

    def _min_depth(self, concept):
        seen = set([concept])
        todo = [concept]
        depth = 1
        while todo:
            todo_next = []
            for synset in todo:
                hypernyms = self.db.hypernyms(synset)
                if not hypernyms:
                    return depth
                for hypernym in hypernyms:
                    if hypernym not in seen:
                        seen.add(hypernym)
                        todo_next.append(hypernym)
            todo = todo_next
            depth += 1
        # every ancestor has a hypernym: the relation loops
        logger.warning('No root above %s', concept)
        return depth - 1

    def shortest_path_length(self, concept1, concept2):
        """
        Returns the number of edges on the shortest path linking the two
        concepts through a common ancestor, 0 for a concept and itself,
        or None if they share no ancestor.
        """
        if concept1 == concept2:
            return 0
        distances1 = self.ancestors(concept1)
        distances2 = self.ancestors(concept2)
        lengths = [distance + distances2[synset]
                   for synset, distance in distances1.items()
                   if synset in distances2]
        if not lengths:
            return None
        return min(lengths)
