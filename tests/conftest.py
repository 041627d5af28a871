"""A small in-memory taxonomy standing in for WordNet."""

from collections import Counter, defaultdict

import pytest

from wordsim.config import WordSimConfiguration
from wordsim.lexical_db import LexicalDatabase
from wordsim.wordsim_classes import Concept

#: synset id -> (lemmas, hypernyms, own count, definition)
#: Depths (root = 1) are given in the comments.
SYNSETS = {
    # nouns
    'entity.n.01': (['entity'], [], 1,
                    'that which is perceived or known or inferred to have its own distinct existence'),  # 1
    'physical_entity.n.01': (['physical_entity'], ['entity.n.01'], 1,
                             'an entity that has physical existence'),  # 2
    'object.n.01': (['object', 'physical_object'], ['physical_entity.n.01'], 1,
                    'a tangible and visible entity; an entity that can cast a shadow; '
                    '"it was full of rackets, balls and other objects"'),  # 3
    'whole.n.02': (['whole', 'unit'], ['object.n.01'], 1,
                   'an assemblage of parts that is regarded as a single entity'),  # 4
    'living_thing.n.01': (['living_thing', 'animate_thing'], ['whole.n.02'], 1,
                          'a living (or once living) entity'),  # 5
    'organism.n.01': (['organism', 'being'], ['living_thing.n.01'], 1,
                      'a living thing that has (or can develop) the ability to act or function independently'),  # 6
    'animal.n.01': (['animal', 'beast'], ['organism.n.01'], 2,
                    'a living organism characterized by voluntary movement'),  # 7
    'chordate.n.01': (['chordate'], ['animal.n.01'], 1,
                      'any animal of the phylum Chordata having a notochord or spinal column'),  # 8
    'body_structure.n.01': (['body_structure'], ['chordate.n.01'], 1,
                            'a structure of the body of a chordate'),  # 9
    'tooth.n.01': (['tooth'], ['body_structure.n.01'], 2,
                   'hard bonelike structures in the jaws of vertebrates; used for biting and chewing'),  # 10
    'canine.n.01': (['canine', 'eyetooth', 'cuspid'], ['tooth.n.01'], 3,
                    'one of the four pointed conical teeth (two in each jaw) located between '
                    'the incisors and the premolars'),  # 11
    'paw.n.01': (['paw'], ['body_structure.n.01'], 0,
                 'a clawed foot of an animal especially a quadruped'),  # 10
    'vertebrate.n.01': (['vertebrate', 'craniate'], ['chordate.n.01'], 1,
                        'animals having a bony or cartilaginous skeleton with a segmented spinal column'),  # 9
    'carnivore.n.01': (['carnivore'], ['vertebrate.n.01'], 1,
                       'a terrestrial or aquatic flesh-eating mammal'),  # 10
    'canine.n.02': (['canine', 'canid'], ['carnivore.n.01'], 2,
                    'any of various fissiped mammals with nonretractile claws and typically long muzzles'),  # 11
    'domestic_animal.n.01': (['domestic_animal', 'domesticated_animal'], ['animal.n.01'], 1,
                             'any of various animals that have been tamed and made fit for a human environment'),  # 8
    # two hypernyms: 12 through canine.n.02, 9 through domestic_animal.n.01
    'dog.n.01': (['dog', 'domestic_dog', 'Canis_familiaris'], ['canine.n.02', 'domestic_animal.n.01'], 10,
                 'a member of the genus Canis (probably descended from the common wolf) that has been '
                 'domesticated by man since prehistoric times; occurs in many breeds; "the dog barked all night"'),
    'hunt.n.01': (['hunt', 'hunting'], ['animal.n.01'], 1,
                  'the pursuit and killing or capture of wild animals regarded as a sport'),  # 8
    'chase.n.01': (['chase', 'pursuit', 'following'], ['animal.n.01'], 1,
                   'the act of pursuing in an effort to overtake or capture'),  # 8
    'pack.n.01': (['pack'], ['animal.n.01'], 0, 'a group of hunting animals'),  # 8
    'wolfpack.n.01': (['wolfpack'], ['pack.n.01'], 4, 'a pack of wolves'),  # 9
    'unicorn.n.01': (['unicorn'], ['animal.n.01'], 0,
                     'an imaginary creature represented as a white horse with a long horn'),  # 8
    # malformed: the two synsets are each other's hypernym
    'loop_a.n.01': (['loop_a'], ['loop_b.n.01'], 1, 'a malformed entry'),
    'loop_b.n.01': (['loop_b'], ['loop_a.n.01'], 1, 'another malformed entry'),

    # verbs
    'travel.v.01': (['travel', 'go', 'move'], [], 1,
                    'change location; move, travel, or proceed, also metaphorically'),  # 1
    'locomote.v.01': (['locomote'], ['travel.v.01'], 1,
                      'move from one place to another'),  # 2
    'run.v.01': (['run'], ['locomote.v.01'], 3,
                 "move fast by using one's feet, with one foot off the ground at any given time"),  # 3
    'jog.v.01': (['jog', 'trot'], ['run.v.01'], 2, 'run for exercise'),  # 4
    'run.v.02': (['run', 'scat', 'scarper'], ['locomote.v.01'], 2,
                 "flee; take to one's heels; cut and run"),  # 3
    'follow.v.01': (['follow'], ['locomote.v.01'], 1, 'to travel behind, go after, come after'),  # 3
    'pursue.v.01': (['pursue'], ['follow.v.01'], 1, 'follow in or as if in pursuit'),  # 4
    'seek.v.01': (['seek', 'look_for'], ['pursue.v.01'], 1,
                  'try to locate or discover, or try to establish the existence of'),  # 5
    'hunt.v.01': (['hunt', 'hunt_down', 'track_down'], ['seek.v.01'], 2,
                  'pursue for food or sport (as of wild animals)'),  # 6
    'chase.v.01': (['chase', 'chase_after', 'trail', 'tail'], ['seek.v.01'], 2,
                   'go after with the intent to catch'),  # 6

    # adjectives
    'quick.a.01': (['quick', 'speedy'], [], 1, 'accomplished rapidly and without delay'),
}

#: (source, pointer symbol, target); the inverse pointer is added as well
POINTERS = [
    ('pack.n.01', '%m', 'dog.n.01'),
    ('dog.n.01', '%p', 'paw.n.01'),
]

_INVERSE = {'@': '~', '~': '@',
            '%m': '#m', '%s': '#s', '%p': '#p',
            '#m': '%m', '#s': '%s', '#p': '%p'}


class ToyWordNet(LexicalDatabase):
    """A ``LexicalDatabase`` over a dict of synsets whose ids read ``lemma.pos.nn``."""

    def __init__(self, synsets=None, pointers=None, config=None, gloss_cache=None):
        super(ToyWordNet, self).__init__(config, gloss_cache)
        self._synsets = synsets if synsets is not None else SYNSETS
        self._pointers = defaultdict(list)
        self._index = defaultdict(list)
        self.frequency_lookups = Counter()
        self.definition_lookups = Counter()

        for synset_id, (lemmas, hypernyms, _, _) in self._synsets.items():
            for hypernym in hypernyms:
                self._add_pointer(synset_id, '@', hypernym)
            pos = synset_id.split('.')[-2]
            for lemma in lemmas:
                self._index[lemma.lower(), pos].append(synset_id)
        for source, symbol, target in (pointers if pointers is not None else POINTERS):
            self._add_pointer(source, symbol, target)

    def _add_pointer(self, source, symbol, target):
        self._pointers[source, symbol].append(target)
        self._pointers[target, _INVERSE[symbol]].append(source)

    def synset(self, synset_id):
        return Concept(synset_id, synset_id.split('.')[-2])

    def all_concepts(self, lemma, pos):
        if not lemma or pos is None:
            return []
        return [Concept(synset_id, pos, lemma)
                for synset_id in self._index.get((lemma.lower(), pos.tag), [])]

    def _related(self, concept, link):
        return [self.synset(synset_id)
                for synset_id in self._pointers.get((concept.synset_id, link.symbol), [])]

    def words(self, concept):
        return list(self._synsets[concept.synset_id][0])

    def definition(self, concept):
        self.definition_lookups[concept.synset_id] += 1
        return self._synsets[concept.synset_id][3]

    def synset_frequency(self, concept):
        self.frequency_lookups[concept.synset_id] += 1
        return float(self._synsets[concept.synset_id][2])


@pytest.fixture
def config():
    return WordSimConfiguration(trace=False, cache=True, stem=False, mfs=False)


@pytest.fixture
def db(config):
    return ToyWordNet(config=config)


@pytest.fixture
def synset(db):
    return db.synset

