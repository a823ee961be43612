"""

Run one SPARQL operation over RDF from files and standard input
================================================================

Every data file is loaded into its own named graph (``file:`` IRI of its
path), standard input into the default graph. Prefixes and the base IRI found
while parsing are accumulated, first one wins, and the prefixes are prepended
to an inline query.

The text is run as a query, with the default graph being the union of all
graphs, or failing that as an update. Solutions and booleans are written as
query results (TSV by default); constructed graphs and updated datasets are
written as RDF (TriG by default).

"""

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

from oxrq.version import __version__

#===============================================================================

from oxrq.options import Options
from oxrq.rdf import RdfDataset
from oxrq.sources import CollectedInput, collect_input
from oxrq.sparql import build_query_text, dispatch
from oxrq.output import route_result, serialize_dataset

#===============================================================================
