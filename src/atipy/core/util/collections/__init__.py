from .at_sequence import AtSequence, AtList
