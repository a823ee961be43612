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

from typing import BinaryIO, Mapping, Optional

#===============================================================================

from ..rdf import DefaultGraph, Quad, RdfDataset
from ..rdf.formats import DEFAULT_DATASET_FORMAT, DEFAULT_RESULTS_FORMAT, QueryResultsFormat, RdfFormat
from ..rdf.formats import resolve_rdf_format, resolve_results_format
from ..sparql import Boolean, Graph, OperationResult, Solutions, UpdateCompleted
from ..utils import ExecutionError, SerializationError, log

#===============================================================================

def results_format(output_format: Optional[str]) -> QueryResultsFormat:
#======================================================================
    if output_format is None:
        return DEFAULT_RESULTS_FORMAT
    return resolve_results_format(output_format)

def dataset_format(output_format: Optional[str]) -> RdfFormat:
#=============================================================
    if output_format is None:
        return DEFAULT_DATASET_FORMAT
    return resolve_rdf_format(output_format)

#===============================================================================

def graph_to_dataset(graph: Graph) -> RdfDataset:
#================================================
    dataset = RdfDataset()
    try:
        for triple in graph:
            dataset.add(Quad(triple.subject, triple.predicate, triple.object, DefaultGraph()))
    except (OSError, RuntimeError, ValueError) as e:
        raise ExecutionError(f'Query failed: {e}') from e
    return dataset

def route_result(result: OperationResult, output: BinaryIO, output_format: Optional[str],
                 dataset: RdfDataset) -> Optional[RdfDataset]:
#=========================================================================================
    """
    Serialize solutions and booleans directly to ``output``.

    Returns ``None`` when the result has been written, otherwise the dataset
    that is to be serialized: a fresh one holding only constructed triples, or
    ``dataset`` itself after an update.
    """
    if isinstance(result, Solutions):
        format = results_format(output_format)
        log.debug(f'Writing solutions as {format.name}', variables=result.variables)
        try:
            result.solutions.serialize(output, format)
        except OSError as e:
            raise SerializationError(f'Unable to write query results: {e}') from e
        except (RuntimeError, ValueError) as e:
            raise ExecutionError(f'Query failed: {e}') from e
        return None
    elif isinstance(result, Boolean):
        format = results_format(output_format)
        try:
            result.result.serialize(output, format)
        except OSError as e:
            raise SerializationError(f'Unable to write query results: {e}') from e
        return None
    elif isinstance(result, Graph):
        return graph_to_dataset(result)
    elif isinstance(result, UpdateCompleted):
        return dataset
    raise TypeError(f'Unexpected operation result: {result!r}')

#===============================================================================

def serialize_dataset(dataset: RdfDataset, output: BinaryIO, output_format: Optional[str],
                      prefixes: Optional[Mapping[str, str]]=None):
#========================================================================================
    format = dataset_format(output_format)
    prefixes = dict(prefixes) if prefixes else None
    try:
        if format.supports_datasets:
            dataset.dump(output, format, prefixes=prefixes)
        elif dataset.has_default_graph():
            dataset.dump(output, format, from_graph=DefaultGraph(), prefixes=prefixes)
        else:
            # Graphs emptied by an update are still enumerated by the store
            named_graphs = [graph for graph in dataset.named_graphs() if dataset.has_quads(graph)]
            if len(named_graphs) == 0:
                dataset.dump(output, format, from_graph=DefaultGraph(), prefixes=prefixes)
            else:
                # Which graph is first depends on the store's enumeration order
                if len(named_graphs) > 1:
                    log.warning(f'{format.name} output can only hold one graph, '
                                f'{len(named_graphs) - 1} named graph(s) not written',
                                graph=named_graphs[0].value)
                dataset.dump(output, format, from_graph=named_graphs[0], prefixes=prefixes)
    except OSError as e:
        raise SerializationError(f'Unable to write {format.name}: {e}') from e

#===============================================================================
#===============================================================================
