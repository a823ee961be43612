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

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, TYPE_CHECKING, TypeAlias

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from ..utils import ExecutionError, OperationParseError, log

if TYPE_CHECKING:
    from ..rdf import RdfDataset

#===============================================================================

def build_query_text(prefixes: Mapping[str, str], body: str) -> str:
#===================================================================
    prologue = ''.join(f'PREFIX {prefix}: <{ns_uri}>\n' for prefix, ns_uri in prefixes.items())
    return f'{prologue}{body}'

#===============================================================================

@dataclass
class Solutions:
    solutions: oxigraph.QuerySolutions

    @property
    def variables(self) -> list[str]:
        return [var.value for var in self.solutions.variables]

    def __iter__(self) -> Iterator[oxigraph.QuerySolution]:
        return iter(self.solutions)

@dataclass
class Boolean:
    result: oxigraph.QueryBoolean

    @property
    def value(self) -> bool:
        return bool(self.result)

@dataclass
class Graph:
    """Constructed or described triples, a single-pass sequence that may fail part way."""
    triples: oxigraph.QueryTriples

    def __iter__(self) -> Iterator[oxigraph.Triple]:
        return iter(self.triples)

@dataclass
class UpdateCompleted:
    pass

OperationResult: TypeAlias = Solutions | Boolean | Graph | UpdateCompleted

#===============================================================================

EXECUTION_ERRORS = (OSError, RuntimeError, ValueError)

def run_query(dataset: 'RdfDataset', text: str, base_iri: Optional[str]=None) -> OperationResult:
#===============================================================================================
    """
    Run ``text`` as a query against the union of all graphs in ``dataset``.

    Raises ``SyntaxError`` if ``text`` is not a query.
    """
    try:
        results = dataset.query(text, base_iri)
    except SyntaxError:
        raise
    except EXECUTION_ERRORS as e:
        raise ExecutionError(f'Query failed: {e}') from e
    if isinstance(results, oxigraph.QuerySolutions):
        return Solutions(results)
    elif isinstance(results, oxigraph.QueryTriples):
        return Graph(results)
    return Boolean(results)

def run_update(dataset: 'RdfDataset', text: str, base_iri: Optional[str]=None) -> OperationResult:
#================================================================================================
    try:
        dataset.update(text, base_iri)
    except SyntaxError:
        raise
    except EXECUTION_ERRORS as e:
        raise ExecutionError(f'Update failed: {e}') from e
    return UpdateCompleted()

def dispatch(dataset: 'RdfDataset', text: str, base_iri: Optional[str]=None) -> OperationResult:
#==============================================================================================
    """
    Execute ``text`` as a SPARQL query or, if it doesn't parse as one, as an update.

    Text that is a valid query is always run as a query. When neither parse
    succeeds, the query's syntax error is reported since a query is the more
    likely intent.
    """
    log.debug(f'Operation text:\n{text}', base_iri=base_iri)
    try:
        return run_query(dataset, text, base_iri)
    except SyntaxError as query_error:
        try:
            return run_update(dataset, text, base_iri)
        except SyntaxError as update_error:
            log.debug(f'Not an update either: {update_error}')
            raise OperationParseError(f'Invalid query: {query_error}') from query_error

#===============================================================================
#===============================================================================
