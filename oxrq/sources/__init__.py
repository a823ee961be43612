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

from dataclasses import dataclass, field
from typing import BinaryIO, Mapping, NamedTuple, Optional

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

from ..options import Options, STDIN_SENTINEL
from ..rdf import DefaultGraph, NamedNode, RdfDataset, graph_iri_for_path, in_graph
from ..rdf.formats import DEFAULT_INPUT_FORMAT, QUERY_FILE_EXTENSION, RdfFormat
from ..rdf.formats import file_extension, resolve_rdf_format
from ..sparql import build_query_text
from ..utils import Issue, RdfParseError, SourceIOError, log, pretty_log

#===============================================================================

@dataclass(frozen=True)
class Source:
    path: Optional[str] = None

    @property
    def is_stdin(self) -> bool:
        return self.path is None

    @property
    def label(self) -> str:
        return '<stdin>' if self.path is None else self.path

    @property
    def extension(self) -> Optional[str]:
        return None if self.path is None else file_extension(self.path)

    @property
    def is_query_file(self) -> bool:
        return (self.extension or '').lower() == QUERY_FILE_EXTENSION

    @property
    def graph_iri(self) -> Optional[str]:
        return None if self.path is None else graph_iri_for_path(self.path)

#===============================================================================

@dataclass(frozen=True)
class SourceReport:
    base_iri: Optional[str] = None
    prefixes: Mapping[str, str] = field(default_factory=dict)
    quad_count: int = 0

@dataclass(frozen=True)
class InputState:
    base_iri: Optional[str] = None
    prefixes: Mapping[str, str] = field(default_factory=dict)

def merge_report(state: InputState, report: SourceReport) -> InputState:
#=======================================================================
    """
    Fold one source's report into the accumulated state.

    The first base IRI and the first binding of each prefix label win. A base
    IRI given on the command line seeds the initial state and so always wins.
    """
    prefixes = dict(state.prefixes)
    for prefix, ns_uri in report.prefixes.items():
        prefixes.setdefault(prefix, ns_uri)
    base_iri = state.base_iri if state.base_iri is not None else report.base_iri
    return InputState(base_iri=base_iri, prefixes=prefixes)

#===============================================================================

def load_source(dataset: RdfDataset, stream: BinaryIO, format: RdfFormat,
                base_iri: Optional[str]=None, graph_iri: Optional[str]=None,
                label: str='<stdin>') -> SourceReport:
#============================================================================
    try:
        parser = oxigraph.parse(stream, format, base_iri=base_iri, rename_blank_nodes=True)
        quads = list(parser)
        if graph_iri is not None:
            graph = NamedNode(graph_iri)
            quads = [in_graph(quad, graph) if isinstance(quad.graph_name, DefaultGraph) else quad
                        for quad in quads]
        dataset.bulk_load(quads)
    except (SyntaxError, ValueError) as e:
        raise RdfParseError(f'{label}: {e}') from e
    except OSError as e:
        raise SourceIOError(f'{label}: {e}') from e
    return SourceReport(base_iri=parser.base_iri,
                        prefixes=dict(parser.prefixes),
                        quad_count=len(quads))

def load_file(dataset: RdfDataset, source: Source, base_iri: Optional[str]=None) -> SourceReport:
#===============================================================================================
    format = resolve_rdf_format(None, source.extension)
    try:
        with open(source.path, 'rb') as fp:
            # Relative IRIs in a file resolve against the file itself
            return load_source(dataset, fp, format,
                               base_iri=base_iri or source.graph_iri,
                               graph_iri=source.graph_iri,
                               label=source.label)
    except OSError as e:
        raise SourceIOError(f'Unable to open file: {source.label} ({e.strerror or e})') from e

def read_query_file(source: Source) -> str:
#==========================================
    try:
        with open(source.path, encoding='utf-8') as fp:
            return fp.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceIOError(f'Unable to read query file: {source.label} ({e})') from e

#===============================================================================

class SourcePlan(NamedTuple):
    data_sources: list[Source]
    query_file: Optional[Source]
    use_stdin: bool
    query: Optional[str]

def plan_sources(options: Options) -> SourcePlan:
#================================================
    query = options.query
    files = list(options.files)
    if options.file_query and query is not None:
        files.append(query)
        query = None

    data_sources: list[Source] = []
    query_file: Optional[Source] = None
    stdin_requested = False
    for fpath in files:
        if fpath == STDIN_SENTINEL:
            stdin_requested = True
            continue
        source = Source(fpath)
        if source.is_query_file:
            if query_file is not None:
                log.warning(f'Ignoring query file {pretty_log(query_file.label)}, {pretty_log(source.label)} given later')
            query_file = source
        else:
            data_sources.append(source)

    use_stdin = stdin_requested or not (options.no_stdin and len(data_sources) > 0)
    return SourcePlan(data_sources, query_file, use_stdin, query)

#===============================================================================

@dataclass
class CollectedInput:
    dataset: RdfDataset
    state: InputState
    query_text: str
    issues: list[Issue] = field(default_factory=list)
    loaded: list[str] = field(default_factory=list)

    @property
    def has_issues(self) -> bool:
        return len(self.issues) > 0

def collect_input(options: Options, stdin: BinaryIO) -> CollectedInput:
#======================================================================
    plan = plan_sources(options)
    dataset = RdfDataset()
    state = InputState(base_iri=options.base_iri)
    issues: list[Issue] = []
    loaded: list[str] = []

    for source in plan.data_sources:
        try:
            report = load_file(dataset, source, options.base_iri)
        except (SourceIOError, RdfParseError) as e:
            log.error(f'Error in file: {e.reason}')
            issues.append(e)
            continue
        log.debug(f'Loaded {report.quad_count} quads from {pretty_log(source.label)}')
        state = merge_report(state, report)
        loaded.append(source.label)

    if plan.use_stdin:
        if options.input_format is not None:
            format = resolve_rdf_format(options.input_format)
        else:
            format = DEFAULT_INPUT_FORMAT
        report = load_source(dataset, stdin, format, base_iri=options.base_iri)
        log.debug(f'Loaded {report.quad_count} quads from {pretty_log("<stdin>")}')
        state = merge_report(state, report)
        loaded.append(Source().label)

    log.debug(f'Dataset holds {len(dataset)} quads', named_graphs=len(dataset.named_graphs()))

    if plan.query_file is not None:
        query_text = read_query_file(plan.query_file)
    elif plan.query is not None:
        query_text = build_query_text(state.prefixes, plan.query)
    else:
        query_text = ''

    return CollectedInput(dataset, state, query_text, issues, loaded)

#===============================================================================
#===============================================================================
