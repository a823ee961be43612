#===============================================================================
#
#  oxrq: SPARQL over RDF files from the command line
#
#  Copyright (c) 2020 - 2025 David Brooks
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.
#
#===============================================================================

from pathlib import Path
from typing import Callable, NamedTuple, Optional

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from ..utils import MissingExtension, UnknownFormat

#===============================================================================

RdfFormat = oxigraph.RdfFormat
QueryResultsFormat = oxigraph.QueryResultsFormat

DEFAULT_INPUT_FORMAT = RdfFormat.TURTLE
DEFAULT_DATASET_FORMAT = RdfFormat.TRIG
DEFAULT_RESULTS_FORMAT = QueryResultsFormat.TSV

QUERY_FILE_EXTENSION = 'rq'

#===============================================================================

class FormatTable(NamedTuple):
    kind: str
    from_extension: Callable
    from_media_type: Callable

RDF_FORMATS = FormatTable('RDF', RdfFormat.from_extension, RdfFormat.from_media_type)
RESULTS_FORMATS = FormatTable('query results', QueryResultsFormat.from_extension,
                                               QueryResultsFormat.from_media_type)

#===============================================================================

def file_extension(path: str|Path) -> Optional[str]:
#===================================================
    suffix = Path(path).suffix
    return suffix[1:] if len(suffix) > 1 else None

def lookup_format(table: FormatTable, name: str):
#================================================
    name = name.strip().lower()
    if '/' in name:
        return table.from_media_type(name)
    return table.from_extension(name.removeprefix('.'))

#===============================================================================

def resolve_format(table: FormatTable, override: Optional[str], extension: Optional[str]):
#=========================================================================================
    if override is not None:
        if (format := lookup_format(table, override)) is None:
            raise UnknownFormat(f'Unknown {table.kind} format: {override}')
        return format
    if extension is None:
        raise MissingExtension(f'Needs a file extension to detect {table.kind} format')
    if (format := lookup_format(table, extension)) is None:
        raise UnknownFormat(f'No {table.kind} format found for extension {extension}')
    return format

def resolve_rdf_format(override: Optional[str], extension: Optional[str]=None) -> RdfFormat:
#==========================================================================================
    return resolve_format(RDF_FORMATS, override, extension)

def resolve_results_format(override: Optional[str], extension: Optional[str]=None) -> QueryResultsFormat:
#=======================================================================================================
    return resolve_format(RESULTS_FORMATS, override, extension)

#===============================================================================
#===============================================================================
