"""
Joins the gene ontology slim mapping of the ORFs with per-gene translational efficiency measurements

Output Columns
----------------

The joined table is written as csv with one row per ORF (in the order the ORFs are first seen in the slim mapping)

- ``Systematic name``: the systematic name of the ORF
- ``Standard name``: the gene name
- ``GO-P (Process)``: the biological process terms (``; `` delimited)
- ``GO-F (Function)``: the molecular function terms
- ``GO-C (Component)``: the cellular component terms
- ``mRNA abundance (<source>)``, ``Ribosome footprint density (<source>)`` and
  ``Translational efficiency (<source>)`` for each efficiency source. ``NaN`` when the ORF was not measured
"""
import csv
import os
import time

import numpy as np
import pandas as pd

from .constants import TrackmapNamespace
from .error import InputFormatError
from .util import LOG, mkdirp

ASPECT = TrackmapNamespace(PROCESS='P', FUNCTION='F', COMPONENT='C')
""":class:`TrackmapNamespace`: the gene ontology aspects

- ``PROCESS``: biological process
- ``FUNCTION``: molecular function
- ``COMPONENT``: cellular component
"""

GO_COLUMNS = [
    (ASPECT.PROCESS, 'GO-P (Process)'),
    (ASPECT.FUNCTION, 'GO-F (Function)'),
    (ASPECT.COMPONENT, 'GO-C (Component)'),
]
SLIM_COLUMNS = ['orf', 'gene', 'aspect', 'term']
EFFICIENCY_COLUMNS = ['mRNA abundance', 'Ribosome footprint density', 'Translational efficiency']
TERM_DELIMITER = '; '
NA_REP = 'NaN'


def read_go_slim(filename):
    """
    read the tab delimited gene ontology slim mapping. The columns used are the ORF (0), the gene (1), the
    aspect (3) and the term (4)

    Returns:
        pandas.DataFrame: the terms in file order with the columns ``orf``, ``gene``, ``aspect`` and ``term``

    Raises:
        InputFormatError: a row has too few columns or an unknown aspect
    """
    try:
        df = pd.read_csv(
            filename, sep='\t', header=None, dtype=str, keep_default_na=False, quoting=csv.QUOTE_NONE
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=SLIM_COLUMNS)
    except pd.errors.ParserError as err:
        raise InputFormatError('Failed to parse', filename) from err

    if df.shape[1] < 5:
        raise InputFormatError('expected at least 5 columns', filename)
    df = df[[0, 1, 3, 4]].copy()
    df.columns = SLIM_COLUMNS
    short_rows = df[df.isnull().any(axis=1)]
    if not short_rows.empty:
        raise InputFormatError('expected at least 5 columns', filename, 'row', short_rows.index[0] + 1)
    invalid = df[~df['aspect'].isin(ASPECT.values())]
    if not invalid.empty:
        raise InputFormatError(
            'Invalid aspect: {}'.format(invalid['aspect'].iloc[0]), filename, 'row', invalid.index[0] + 1)
    return df.reset_index(drop=True)


def read_efficiency_table(filename):
    """
    read a comma delimited table of translational efficiency measurements. The first row is a header, the first
    column is the ORF and the next three are the measurements

    Returns:
        pandas.DataFrame: the float measurements (columns :data:`EFFICIENCY_COLUMNS`) indexed by ORF

    Raises:
        InputFormatError: a value cannot be parsed as a float
    """
    try:
        df = pd.read_csv(filename, dtype=str, keep_default_na=False)
    except pd.errors.ParserError as err:
        raise InputFormatError('Failed to parse', filename) from err
    if df.shape[1] < 4:
        raise InputFormatError('expected at least 4 columns', filename)
    df = df.iloc[:, :4].copy()
    df.columns = ['orf'] + EFFICIENCY_COLUMNS
    try:
        df[EFFICIENCY_COLUMNS] = df[EFFICIENCY_COLUMNS].astype(float)
    except ValueError as err:
        raise InputFormatError('Failed to parse the measurements', filename) from err
    # a repeated ORF keeps its last measurements
    return df.drop_duplicates('orf', keep='last').set_index('orf')


def combine_terms(slims, efficiencies):
    """
    Args:
        slims (pandas.DataFrame): the gene ontology terms (see :func:`read_go_slim`)
        efficiencies (:class:`list` of :class:`tuple`): pairs of source name and measurements by ORF
            (see :func:`read_efficiency_table`)

    Returns:
        pandas.DataFrame: a row per ORF with the output columns
    """
    rows = []
    for orf, group in slims.groupby('orf', sort=False):
        row = {'Systematic name': orf, 'Standard name': group['gene'].iloc[0]}
        for aspect, column in GO_COLUMNS:
            row[column] = TERM_DELIMITER.join(group.loc[group['aspect'] == aspect, 'term'])
        rows.append(row)
    df = pd.DataFrame.from_records(rows, columns=output_columns([]))

    for source, measurements in efficiencies:
        values = measurements.reindex(df['Systematic name'])
        for column in EFFICIENCY_COLUMNS:
            df['{} ({})'.format(column, source)] = values[column].to_numpy(dtype=float)
    return df


def output_columns(sources):
    """
    Example:
        >>> output_columns(['Weinberg'])[5:]
        ['mRNA abundance (Weinberg)', 'Ribosome footprint density (Weinberg)', 'Translational efficiency (Weinberg)']
    """
    columns = ['Systematic name', 'Standard name'] + [column for _, column in GO_COLUMNS]
    for source in sources:
        columns.extend(['{} ({})'.format(column, source) for column in EFFICIENCY_COLUMNS])
    return columns


def format_float(value):
    """
    positional notation with at least one decimal place

    Example:
        >>> format_float(1e-05)
        '0.00001'
        >>> format_float(2.0)
        '2.0'
    """
    return np.format_float_positional(value, trim='0')


def write_rows(rows, filename, sources):
    """
    write the joined rows to a csv file

    Args:
        rows (pandas.DataFrame): the joined rows (see :func:`combine_terms`)
    """
    rows.to_csv(
        filename, columns=output_columns(sources), index=False, na_rep=NA_REP, float_format=format_float,
        lineterminator='\n'
    )


def main(output, go_slim, efficiency, start_time=int(time.time()), **kwargs):
    """
    Args:
        output (str): path to the output csv file
        go_slim (str): path to the gene ontology slim mapping
        efficiency (:class:`list` of :class:`list`): pairs of source name and path to the efficiency table
    """
    if os.path.dirname(output):
        mkdirp(os.path.dirname(output))
    LOG('reading:', go_slim, time_stamp=True)
    slims = read_go_slim(go_slim)
    sources = []
    for source, filename in efficiency:
        LOG('reading:', filename, time_stamp=True)
        sources.append((source, read_efficiency_table(filename)))
    rows = combine_terms(slims, sources)
    LOG('writing:', output, time_stamp=True)
    write_rows(rows, output, [source for source, _ in sources])
    LOG('wrote', len(rows), 'rows', indent_level=1)
