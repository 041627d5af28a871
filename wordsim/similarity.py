import logging
import math

from wordsim.calculator import RelatednessCalculator
from wordsim.wordsim_utils import _INF, ROOT_SMOOTHING

logger = logging.getLogger(__name__)


class JiangConrath(RelatednessCalculator):
    """
    Jiang-Conrath Similarity:
    Return a score denoting how similar two word senses are, based on the
    Information Content (IC) of the Least Common Subsumer (most specific
    ancestor node) and that of the two input concepts. The relationship
    is given by the equation 1 / (IC(s1) + IC(s2) - 2 * IC(lcs)), the
    inverse of the Jiang-Conrath distance.

    When the distance is exactly zero (the concepts are only apart by
    synsets with no observed counts) the root frequency is smoothed by
    ``ROOT_SMOOTHING`` to keep the score finite. Concepts without an IC,
    or whose root has no count, score 0.
    """

    min_score = 0.0
    max_score = _INF

    def calc_relatedness(self, concept1, concept2):
        tracer = self._tracer()
        subsumers = self.path_finder.lowest_common_subsumers(concept1, concept2)
        if not subsumers:
            return self._result(self.min_score, tracer)
        self._trace_subsumers(tracer, subsumers)

        subsumer = subsumers[0]
        root_frequency = self.ic_finder.root_frequency(subsumer.concept)
        if root_frequency <= 0:
            return self._result(self.min_score, tracer)

        ic1 = self.ic_finder.ic(concept1)
        ic2 = self.ic_finder.ic(concept2)
        self._trace_concepts(tracer, concept1, ic1, concept2, ic2)
        if ic1 <= 0 or ic2 <= 0:
            return self._result(self.min_score, tracer)

        distance = ic1 + ic2 - 2 * subsumer.ic
        if distance == 0:
            if root_frequency <= ROOT_SMOOTHING:
                return self._result(self.min_score, tracer)
            logger.debug('Zero distance between %s and %s, smoothing root frequency',
                         concept1, concept2)
            score = 1.0 / -math.log((root_frequency - ROOT_SMOOTHING) / root_frequency)
        else:
            score = 1.0 / distance
        return self._result(score, tracer)


class Lin(RelatednessCalculator):
    """
    Lin Similarity:
    Return a score denoting how similar two word senses are, based on the
    Information Content (IC) of the Least Common Subsumer (most specific
    ancestor node) and that of the two input concepts. The relationship
    is given by the equation 2 * IC(lcs) / (IC(s1) + IC(s2)).

    Scores are in the range 0 to 1; concepts without an IC score 0.
    """

    min_score = 0.0
    max_score = 1.0

    def calc_relatedness(self, concept1, concept2):
        tracer = self._tracer()
        subsumers = self.path_finder.lowest_common_subsumers(concept1, concept2)
        if not subsumers:
            return self._result(self.min_score, tracer)
        ic1 = self.ic_finder.ic(concept1)
        ic2 = self.ic_finder.ic(concept2)
        if ic1 > 0 and ic2 > 0:
            score = 2.0 * subsumers[0].ic / (ic1 + ic2)
        else:
            score = 0.0
        self._trace_subsumers(tracer, subsumers)
        self._trace_concepts(tracer, concept1, ic1, concept2, ic2)
        return self._result(score, tracer)


class Resnik(RelatednessCalculator):
    """
    Resnik Similarity:
    Return a score denoting how similar two word senses are, based on the
    Information Content (IC) of the Least Common Subsumer. Concepts whose
    LCS is the root of the taxonomy score 0.
    """

    min_score = 0.0
    max_score = _INF

    def calc_relatedness(self, concept1, concept2):
        tracer = self._tracer()
        subsumers = self.path_finder.lowest_common_subsumers(concept1, concept2)
        if not subsumers:
            return self._result(self.min_score, tracer)
        self._trace_subsumers(tracer, subsumers)
        return self._result(subsumers[0].ic, tracer)


class WuPalmer(RelatednessCalculator):
    """
    Wu-Palmer Similarity:
    Return a score denoting how similar two word senses are, based on the
    depth of the two senses in the taxonomy and that of their Least
    Common Subsumer (the deepest common ancestor node):
    2 * depth(lcs) / (depth(s1) + depth(s2)).

    The depth of each sense is measured through the LCS: the depth of
    the LCS plus the length of the shortest hypernym path from the sense
    up to it. Where multiple candidates for the LCS exist, the first is
    used. If no LCS exists the score is 0.
    """

    min_score = 0.0
    max_score = 1.0

    def calc_relatedness(self, concept1, concept2):
        tracer = self._tracer()
        subsumers = self.path_finder.lowest_common_subsumers_by_depth(concept1, concept2)
        if not subsumers:
            return self._result(self.min_score, tracer)
        self._trace_subsumers(tracer, subsumers, 'Depth')

        lcs = subsumers[0].concept
        depth = subsumers[0].ic
        depth1 = depth + self.path_finder.ancestors(concept1)[lcs]
        depth2 = depth + self.path_finder.ancestors(concept2)[lcs]
        self._trace(tracer, 'Depth1( %s ) = %d\n', concept1.synset_id, depth1)
        self._trace(tracer, 'Depth2( %s ) = %d\n', concept2.synset_id, depth2)
        return self._result(2.0 * depth / (depth1 + depth2), tracer)


class Path(RelatednessCalculator):
    """
    Path Distance Similarity:
    Return a score denoting how similar two word senses are, based on the
    shortest path that connects the senses in the is-a (hypernym/hyponym)
    taxonomy: 1 / (path length + 1). The score is in the range 0 to 1,
    0 when no path can be found and 1 for a sense and itself.
    """

    min_score = 0.0
    max_score = 1.0

    def calc_relatedness(self, concept1, concept2):
        tracer = self._tracer()
        length = self.path_finder.shortest_path_length(concept1, concept2)
        if length is None:
            return self._result(self.min_score, tracer)
        self._trace(tracer, 'Shortest path: %d\n', length)
        return self._result(1.0 / (length + 1), tracer)
