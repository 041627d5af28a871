import logging
import re
import time
from abc import ABC, abstractmethod

from nltk.corpus import wordnet
from nltk.stem import PorterStemmer

from wordsim.config import WordSimConfiguration
from wordsim.wordsim_classes import Concept
from wordsim.wordsim_utils import Cache, Link, POS, WordNetError

logger = logging.getLogger(__name__)

######################################################################
## Gloss normalisation
######################################################################

#: Example sentences trail the definition as ``; "..."``
_EXAMPLES = re.compile(r'; ".+')

#: Applied in order to every gloss before it is split into tokens
GLOSS_SUBSTITUTIONS = [
    (re.compile(r'[.;:,?!(){}"`$%@<>]'), ' '),
    (re.compile(r'&'), ' and '),
    (re.compile(r'_'), ' '),
    (re.compile(r' +'), ' '),
    (re.compile(r"(?<!\w)'"), ' '),
    (re.compile(r"'(?!\w)"), ' '),
    (re.compile(r'--'), ' '),
]


def normalize_gloss(gloss, stem=None):
    """
    Turn a definition into a list of lower-cased tokens with the
    punctuation in ``GLOSS_SUBSTITUTIONS`` removed.

    :param stem: Optional callable applied to every token.
    """
    gloss = _EXAMPLES.sub('', gloss, count=1)
    for pattern, replacement in GLOSS_SUBSTITUTIONS:
        gloss = pattern.sub(replacement, gloss)
    tokens = gloss.lower().split()
    if stem is not None:
        tokens = [stem(token) for token in tokens]
    return tokens


######################################################################
## Lexical Database
######################################################################

class LexicalDatabase(ABC):
    """
    The dictionary the relatedness measures are computed over.

    Subclasses provide the primitive lookups (``all_concepts``,
    ``_related``, ``words``, ``definition`` and ``synset_frequency``);
    sense indexing, aggregate links and gloss normalisation and caching
    are shared.
    """

    _stemmer = PorterStemmer()

    def __init__(self, config=None, gloss_cache=None):
        self.config = config if config is not None else WordSimConfiguration()
        if gloss_cache is None and self.config.cache:
            gloss_cache = Cache('gloss')
        self._gloss_cache = gloss_cache

    #////////////////////////////////////////////////////////////
    # Primitive lookups
    #////////////////////////////////////////////////////////////
    @abstractmethod
    def all_concepts(self, lemma, pos):
        """Return the concepts of ``lemma`` as ``pos``, most frequent sense first."""

    @abstractmethod
    def _related(self, concept, link):
        """Return the concepts ``link`` points to; ``link`` is never an aggregate."""

    @abstractmethod
    def words(self, concept):
        """Return the lemma names of the synset."""

    @abstractmethod
    def definition(self, concept):
        """Return the raw definition text of the synset."""

    @abstractmethod
    def synset_frequency(self, concept):
        """Return the corpus count of the synset itself, excluding its hyponyms."""

    #////////////////////////////////////////////////////////////
    # Retrieve concepts
    #////////////////////////////////////////////////////////////
    def concept(self, lemma, pos, sense=1):
        """
        Return the ``sense``-th (1-based) concept of ``lemma`` as ``pos``,
        or None if there is no such sense.
        """
        if sense < 1:
            return None
        concepts = self.all_concepts(lemma, pos)
        if sense > len(concepts):
            return None
        return concepts[sense - 1]

    def related_concepts(self, concept, link):
        """
        Return the concepts related to ``concept`` through ``link``.
        ``Link.SYNSET`` (and None) give the concept itself; aggregate
        links give the union of their member, substance and part variants.
        """
        if link is None or link is Link.SYNSET:
            return [concept]
        related = []
        for variant in link.variants:
            related.extend(self._related(concept, variant))
        return related

    def hypernyms(self, concept):
        return self.related_concepts(concept, Link.HYPERNYM)

    def hyponyms(self, concept):
        return self.related_concepts(concept, Link.HYPONYM)

    #////////////////////////////////////////////////////////////
    # Glosses
    #////////////////////////////////////////////////////////////
    def stem(self, token):
        return self._stemmer.stem(token)

    def gloss(self, concept, link):
        """
        Return the normalised tokens of the glosses reached from
        ``concept`` through ``link``.

        With ``link=None`` the concept's own definition is used, with
        ``Link.SYNSET`` the words of the synset stand in for a gloss.
        Cached per (concept, link) when caching is enabled; callers
        always get their own copy of the list.
        """
        key = (concept.synset_id, link)
        if self._gloss_cache is not None:
            cached = self._gloss_cache.get(key)
            if cached is not None:
                return list(cached)

        stem = self.stem if self.config.stem else None
        if link is Link.SYNSET:
            texts = [' '.join(self.words(concept))]
        else:
            texts = [self.definition(related)
                     for related in self.related_concepts(concept, link)]

        tokens = []
        for text in texts:
            if text is None:
                continue
            tokens.extend(normalize_gloss(text, stem))

        if self._gloss_cache is not None:
            tokens = list(self._gloss_cache.put_if_absent(key, tokens))
        return tokens


class NLTKWordNet(LexicalDatabase):
    """
    A lexical database backed by NLTK's WordNet corpus reader.

    Concept identifiers are NLTK synset names such as ``dog.n.01``.
    The corpus is opened when the database is built; a missing corpus
    raises ``WordNetError`` straight away.
    """

    #{ Methods of nltk's Synset implementing each concrete link
    _RELATION_METHODS = {
        Link.HYPERNYM: ('hypernyms', 'instance_hypernyms'),
        Link.HYPONYM: ('hyponyms', 'instance_hyponyms'),
        Link.MERONYM_MEMBER: ('member_meronyms',),
        Link.MERONYM_SUBSTANCE: ('substance_meronyms',),
        Link.MERONYM_PART: ('part_meronyms',),
        Link.HOLONYM_MEMBER: ('member_holonyms',),
        Link.HOLONYM_SUBSTANCE: ('substance_holonyms',),
        Link.HOLONYM_PART: ('part_holonyms',),
    }
    #}

    def __init__(self, config=None, reader=None, gloss_cache=None):
        super(NLTKWordNet, self).__init__(config, gloss_cache)
        self._reader = reader if reader is not None else wordnet
        self.version = self._open()

    def _open(self):
        try:
            if not self.config.memory_db:
                return self._reader.get_version()
            logger.info('Loading WordNet into memory...')
            t = time.time()
            version = self._reader.get_version()
            n_synsets = sum(1 for _ in self._reader.all_synsets())
            logger.info('WordNet %s loaded into memory (%d synsets) in %d sec.',
                        version, n_synsets, time.time() - t)
            return version
        except (LookupError, OSError) as e:
            raise WordNetError('WordNet could not be opened: %s' % e)

    def _synset(self, concept):
        return self._reader.synset(concept.synset_id)

    def _to_concept(self, synset, lemma=None):
        return Concept(synset.name(), POS.from_tag(synset.pos()), lemma)

    def all_concepts(self, lemma, pos):
        if not lemma or pos is None:
            return []
        form = lemma.strip().replace(' ', '_')
        concepts = []
        for synset in self._reader.synsets(form, pos=pos.tag):
            concept = Concept(synset.name(), pos, lemma)
            if concept not in concepts:
                concepts.append(concept)
        return concepts

    def _related(self, concept, link):
        try:
            methods = self._RELATION_METHODS[link]
        except KeyError:
            raise WordNetError('Link %s cannot be followed' % link)
        synset = self._synset(concept)
        return [self._to_concept(related)
                for method in methods
                for related in getattr(synset, method)()]

    def words(self, concept):
        return list(self._synset(concept).lemma_names())

    def definition(self, concept):
        return self._synset(concept).definition()

    def synset_frequency(self, concept):
        return float(sum(lemma.count() for lemma in self._synset(concept).lemmas()))

    def stem(self, token):
        return self._reader.morphy(token) or token
