"""
module responsible for small utility functions and constants used throughout the trackmap package
"""
import argparse
import os
import re

from Bio.Seq import Seq


PROGNAME = 'trackmap'
EXIT_OK = 0


def cast_boolean(input_value):
    """
    cast a string value to a boolean

    Example:
        >>> cast_boolean('yes')
        True
        >>> cast_boolean('0')
        False
    """
    value = str(input_value).lower()
    if value in ['t', 'true', '1', 'y', 'yes', '+']:
        return True
    elif value in ['f', 'false', '0', 'n', 'no', '-']:
        return False
    raise TypeError('casting to boolean failed', input_value)


class TrackmapNamespace:
    """
    Namespace of module constants and of the defaults exposed on the command line

    Example:
        >>> nspace = TrackmapNamespace(thing=1, otherthing=2)
        >>> nspace.thing
        1
        >>> nspace['otherthing']
        2
    """

    def __init__(self, **kwargs):
        object.__setattr__(self, '_defns', {})
        object.__setattr__(self, '_types', {})
        object.__setattr__(self, '_members', {})
        object.__setattr__(self, '_env_prefix', 'TRACKMAP')

        for attr, val in kwargs.items():
            self[attr] = val
            self._set_type(attr, type(val))

    def discard(self, attr):
        """
        Remove a variable if it exists
        """
        self._members.pop(attr, None)
        self._defns.pop(attr, None)
        self._types.pop(attr, None)

    def get_env_name(self, attr):
        """
        Example:
            >>> TrackmapNamespace(max_tracks=1).get_env_name('max_tracks')
            'TRACKMAP_MAX_TRACKS'
        """
        return '{}_{}'.format(self._env_prefix, attr).upper()

    def get_env_var(self, attr):
        """
        retrieve the environment variable definition of a given attribute, cast to the type of the attribute

        Raises:
            KeyError: the environment variable is not set
        """
        env = os.environ[self.get_env_name(attr)].strip()
        return self._types.get(attr, str)(env)

    def is_env_overwritable(self, attr):
        """
        Returns:
            bool: True if the variable is overridden by specifying the environment variable equivalent
        """
        return False

    def __getattribute__(self, attr):
        try:
            return object.__getattribute__(self, attr)
        except AttributeError as err:
            variables = object.__getattribute__(self, '_members')
            if attr not in variables:
                raise err
            if self.is_env_overwritable(attr):
                try:
                    return self.get_env_var(attr)
                except KeyError:
                    pass
            return variables[attr]

    def items(self):
        """
        Example:
            >>> TrackmapNamespace(thing=1, otherthing=2).items()
            [('thing', 1), ('otherthing', 2)]
        """
        return [(k, self[k]) for k in self.keys()]

    def __getitem__(self, key):
        return getattr(self, key)

    def __setitem__(self, key, val):
        self.__setattr__(key, val)

    def __setattr__(self, attr, val):
        if attr.startswith('_'):
            raise ValueError('cannot set private', attr)
        object.__getattribute__(self, '_members')[attr] = val

    def get(self, key, default=None):
        """
        get an attribute, return the default if the attribute does not exist
        """
        try:
            return self[key]
        except AttributeError:
            return default

    def keys(self):
        return list(self._members)

    def __iter__(self):
        return iter(self.keys())

    def values(self):
        """
        get the attribute values as a list

        Example:
            >>> TrackmapNamespace(thing=1, otherthing=2).values()
            [1, 2]
        """
        return [self[k] for k in self._members]

    def enforce(self, value):
        """
        checks that the current namespace has a given value

        Returns:
            the input value

        Raises:
            KeyError: the value did not exist
        """
        if value not in self.values():
            raise KeyError('value {0} is not a valid member of '.format(repr(value)), self.values())
        return value

    def _set_type(self, attr, cast_type):
        if cast_type == bool:
            self._types[attr] = cast_boolean
        else:
            self._types[attr] = cast_type

    def type(self, attr):
        """
        returns the function used to cast values of the attribute

        Example:
            >>> TrackmapNamespace(thing=1).type('thing')
            <class 'int'>
        """
        return self._types[attr]

    def define(self, attr, default=None):
        """
        Returns:
            str: definition for the attribute, or the default if it has none
        """
        return self._defns.get(attr, default)

    def add(self, attr, value, defn=None, cast_type=None):
        """
        Add an attribute to the name space

        Args:
            attr (str): name of the attribute being added
            value: the value of the attribute
            defn (str): the definition, will be used in generating help menus
            cast_type (callable): the function to use in casting the value

        Example:
            >>> nspace = TrackmapNamespace()
            >>> nspace.add('thing', value=1, cast_type=int, defn='I am a thing')
        """
        self._set_type(attr, cast_type or type(value))
        if defn:
            self._defns[attr] = defn
        self[attr] = value


def positive_int(num):
    """
    cast input to an integer greater than zero

    Raises:
        argparse.ArgumentTypeError: if the input cannot be cast or is not positive
    """
    try:
        num = int(num)
    except ValueError:
        raise argparse.ArgumentTypeError('Must be a positive integer')
    if num < 1:
        raise argparse.ArgumentTypeError('Must be a positive integer')
    return num


CHROMOSOME = TrackmapNamespace(
    I='I', II='II', III='III', IV='IV', V='V', VI='VI', VII='VII', VIII='VIII',  # noqa
    IX='IX', X='X', XI='XI', XII='XII', XIII='XIII', XIV='XIV', XV='XV', XVI='XVI',
    MITO='Mito'
)
""":class:`TrackmapNamespace`: holds controlled vocabulary for the chromosomes of the genome

- ``I`` .. ``XVI``: the nuclear chromosomes by roman numeral
- ``MITO``: the mitochondrial chromosome
"""

FEATURE_CATEGORY = TrackmapNamespace(ORF='ORF', RNA='RNA', OTHER='Other')
""":class:`TrackmapNamespace`: holds controlled vocabulary for the feature catalogs

- ``ORF``: open reading frames
- ``RNA``: non-coding RNA genes
- ``OTHER``: any other genomic feature
"""

SUBTYPE = TrackmapNamespace(
    NONE='',
    UNKNOWN='?',
    UTR5="UTR 5'",
    UTR3="UTR 3'",
    EXON='Exon',
    INTRON='Intron'
)
""":class:`TrackmapNamespace`: holds the labels written to the subtype column of the annotated table

The order of the members is the order of the codes stored in the annotation grid
"""

FASTA_TYPE = TrackmapNamespace(CHROMOSOME='chromosome', GENE='gene', UTR='utr')
""":class:`TrackmapNamespace`: the header grammars a reference fasta record may follow"""


def transcribe(s):
    """
    uppercase a sequence and replace T with U

    Example:
        >>> transcribe('atgc')
        'AUGC'
    """
    return str(s).upper().replace('T', 'U')


def reverse_complement(s):
    """
    wrapper for the Bio.Seq reverse_complement_rna method

    Args:
        s (str): the input RNA sequence

    Returns:
        :class:`str`: the reverse complement of the input sequence

    Example:
        >>> reverse_complement('AUCCGGU')
        'ACCGGAU'
    """
    input_string = str(s)
    if not re.match('^[A-Za-z]*$', input_string):
        raise ValueError('unexpected sequence format. cannot reverse complement', input_string)
    return str(Seq(input_string).reverse_complement_rna())
