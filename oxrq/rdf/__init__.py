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
from typing import BinaryIO, Iterable, Iterator, Optional, TypeAlias

#===============================================================================

import pyoxigraph as oxigraph

#===============================================================================

BlankNode = oxigraph.BlankNode
DefaultGraph = oxigraph.DefaultGraph
Literal = oxigraph.Literal
NamedNode = oxigraph.NamedNode
Quad = oxigraph.Quad

GraphName: TypeAlias = NamedNode | BlankNode | DefaultGraph
QueryResult: TypeAlias = oxigraph.QuerySolutions | oxigraph.QueryBoolean | oxigraph.QueryTriples

#===============================================================================

def graph_iri_for_path(path: str|Path) -> str:
#=============================================
    fpath = str(path)
    iri = f'file://{fpath}' if fpath.startswith('/') else f'file:{fpath}'
    return iri.replace(' ', '%20')

def in_graph(quad: Quad, graph: GraphName) -> Quad:
#==================================================
    return Quad(quad.subject, quad.predicate, quad.object, graph)

#===============================================================================

class RdfDataset:
    def __init__(self):
        self.__store = oxigraph.Store()

    def __contains__(self, quad: Quad) -> bool:
    #==========================================
        return quad in self.__store

    def __len__(self) -> int:
    #========================
        return len(self.__store)

    def add(self, quad: Quad):
    #=========================
        self.__store.add(quad)

    def bulk_load(self, quads: Iterable[Quad]):
    #==========================================
        self.__store.bulk_extend(quads)

    def quads(self, graph: Optional[GraphName]=None) -> Iterator[Quad]:
    #==================================================================
        return self.__store.quads_for_pattern(None, None, None, graph)

    def has_quads(self, graph: GraphName) -> bool:
    #=============================================
        try:
            self.quads(graph).__next__()
            return True
        except StopIteration:
            return False

    def has_default_graph(self) -> bool:
    #===================================
        return self.has_quads(DefaultGraph())

    def named_graphs(self) -> list[NamedNode|BlankNode]:
    #===================================================
        return list(self.__store.named_graphs())

    def query(self, query: str, base_iri: Optional[str]=None) -> QueryResult:
    #========================================================================
        # Data loaded from files lives in named graphs
        return self.__store.query(query, base_iri=base_iri, use_default_graph_as_union=True)

    def update(self, update: str, base_iri: Optional[str]=None):
    #===========================================================
        self.__store.update(update, base_iri=base_iri)

    def dump(self, output: BinaryIO, format: oxigraph.RdfFormat,
             from_graph: Optional[GraphName]=None, prefixes: Optional[dict[str, str]]=None):
    #====================================================================================
        if from_graph is None:
            self.__store.dump(output, format, prefixes=prefixes)
        else:
            self.__store.dump(output, format, from_graph=from_graph, prefixes=prefixes)

#===============================================================================
#===============================================================================
