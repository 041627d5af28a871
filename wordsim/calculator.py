import logging
from abc import ABC, abstractmethod

from wordsim.path_finder import PathFinder
from wordsim.wordsim_classes import Relatedness
from wordsim.wordsim_utils import _INF, POS, parse_word

logger = logging.getLogger(__name__)


class RelatednessCalculator(ABC):
    """
    Scores the relatedness of two concepts, or of two words through
    their senses.

    A measure provides ``calc_relatedness`` for two distinct, non-null
    concepts and declares its bounds (``min_score``, ``max_score``) and
    the pairs of parts of speech it can compare (``pos_pairs``).
    Everything else is shared: null and identical concepts, the
    part-of-speech filter, word to sense resolution, picking the best
    scoring senses and clamping scores to the declared bounds.

    Unknown words and degenerate cases score ``min_score``; nothing is
    raised across this interface.
    """

    min_score = 0.0
    max_score = 1.0
    pos_pairs = ((POS.NOUN, POS.NOUN), (POS.VERB, POS.VERB))

    illegal_synset = 'Synset is null.'
    identical_synset = 'Synsets are identical.'
    illegal_pos = 'POS pair %s-%s is not supported.'

    def __init__(self, db, config=None, path_finder=None):
        self.db = db
        self.config = config if config is not None else db.config
        self.path_finder = path_finder if path_finder is not None else PathFinder(db)
        self.ic_finder = self.path_finder.ic_finder

    @abstractmethod
    def calc_relatedness(self, concept1, concept2):
        """Return the ``Relatedness`` of two distinct concepts."""

    def get_min(self):
        return self.min_score

    def get_max(self):
        return self.max_score

    def get_pos_pairs(self):
        return set(self.pos_pairs)

    #////////////////////////////////////////////////////////////
    # Concepts
    #////////////////////////////////////////////////////////////
    def calc_relatedness_of_synsets(self, concept1, concept2):
        if concept1 is None or concept2 is None:
            return Relatedness(self.min_score, None, self.illegal_synset)
        if concept1.synset_id == concept2.synset_id:
            trace = self.identical_synset if self.config.trace else None
            return Relatedness(self.max_score, trace, None)
        if (concept1.pos is not None and concept2.pos is not None and
                (concept1.pos, concept2.pos) not in self.pos_pairs):
            error = self.illegal_pos % (concept1.pos, concept2.pos)
            return Relatedness(self.min_score, None, error)

        relatedness = self.calc_relatedness(concept1, concept2)
        relatedness.score = self._clamp(relatedness.score)
        return relatedness

    def _clamp(self, score):
        return min(self.max_score, max(self.min_score, score))

    #////////////////////////////////////////////////////////////
    # Words
    #////////////////////////////////////////////////////////////
    def calc_relatedness_of_words(self, word1, word2):
        """
        Return the best score over the senses of two words.

        A word may carry a part-of-speech tag as in ``dog#n``. A tagged
        word is only read as that part of speech; a tag the database does
        not know, or a pair of tags the measure does not support, gives
        ``min_score``. Untagged words are tried as every part of speech
        the measure supports.
        """
        if not word1 or not word2:
            return self.min_score
        lemma1, tag1 = parse_word(word1)
        lemma2, tag2 = parse_word(word2)
        pos1 = POS.from_tag(tag1)
        pos2 = POS.from_tag(tag2)
        if (tag1 is not None and pos1 is None) or (tag2 is not None and pos2 is None):
            logger.debug('Unknown POS tag in %r or %r', word1, word2)
            return self.min_score

        best = self.min_score
        for p1, p2 in self.pos_pairs:
            if pos1 is not None and p1 is not pos1:
                continue
            if pos2 is not None and p2 is not pos2:
                continue
            for concept1 in self._senses(lemma1, p1):
                for concept2 in self._senses(lemma2, p2):
                    score = self.calc_relatedness_of_synsets(concept1, concept2).score
                    if score > best:
                        best = score
        return best

    def _senses(self, lemma, pos):
        concepts = self.db.all_concepts(lemma, pos)
        if self.config.mfs:
            return concepts[:1]
        return concepts

    def get_relatedness_matrix(self, words1, words2):
        return [[self.calc_relatedness_of_words(word1, word2) for word2 in words2]
                for word1 in words1]

    def get_normalized_relatedness_matrix(self, words1, words2):
        """
        Like ``get_relatedness_matrix``, scaled so scores from measures
        with different bounds can be compared: every score is divided by
        the highest finite score (or 1 if that is lower), and unbounded
        scores become 1.
        """
        matrix = self.get_relatedness_matrix(words1, words2)
        best = 1.0
        for row in matrix:
            for score in row:
                if best < score < _INF:
                    best = score
        return [[1.0 if score >= _INF else score / best for score in row]
                for row in matrix]

    #////////////////////////////////////////////////////////////
    # Tracing
    #////////////////////////////////////////////////////////////
    def _tracer(self):
        return [] if self.config.trace else None

    @staticmethod
    def _trace(tracer, fmt, *args):
        if tracer is not None:
            tracer.append(fmt % args)

    @staticmethod
    def _trace_text(tracer):
        if tracer is None:
            return None
        return ''.join(tracer)

    def _trace_subsumers(self, tracer, subsumers, label='IC'):
        for subsumer in subsumers:
            self._trace(tracer, 'Lowest Common Subsumer(s): %s (%s = %s)\n',
                        subsumer.concept.synset_id, label, subsumer.ic)

    def _trace_concepts(self, tracer, concept1, ic1, concept2, ic2):
        self._trace(tracer, 'Concept1: %s (IC = %s)\n', concept1.synset_id, ic1)
        self._trace(tracer, 'Concept2: %s (IC = %s)\n', concept2.synset_id, ic2)

    def _result(self, score, tracer):
        return Relatedness(score, self._trace_text(tracer))
