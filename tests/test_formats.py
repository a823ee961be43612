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

import pytest

#===============================================================================

from oxrq.rdf.formats import QueryResultsFormat, RdfFormat
from oxrq.rdf.formats import file_extension, resolve_rdf_format, resolve_results_format
from oxrq.utils import FormatResolutionError, MissingExtension, UnknownFormat

#===============================================================================

def test_rdf_format_from_extension():
#====================================
    assert resolve_rdf_format(None, 'ttl') == RdfFormat.TURTLE
    assert resolve_rdf_format(None, 'nt') == RdfFormat.N_TRIPLES
    assert resolve_rdf_format(None, 'nq') == RdfFormat.N_QUADS
    assert resolve_rdf_format(None, 'rdf') == RdfFormat.RDF_XML
    assert resolve_rdf_format(None, 'trig') == RdfFormat.TRIG

def test_override_takes_precedence():
#====================================
    assert resolve_rdf_format('nt', 'ttl') == RdfFormat.N_TRIPLES

def test_override_is_case_insensitive():
#=======================================
    assert resolve_rdf_format('TTL') == RdfFormat.TURTLE
    assert resolve_rdf_format('.trig') == RdfFormat.TRIG

def test_media_type_override():
#==============================
    assert resolve_rdf_format('text/turtle') == RdfFormat.TURTLE
    assert resolve_results_format('application/sparql-results+json') == QueryResultsFormat.JSON

def test_unknown_override():
#===========================
    with pytest.raises(UnknownFormat):
        resolve_rdf_format('nope', 'ttl')

def test_unknown_extension():
#============================
    with pytest.raises(UnknownFormat):
        resolve_rdf_format(None, 'docx')

def test_missing_extension():
#============================
    with pytest.raises(MissingExtension) as excinfo:
        resolve_rdf_format(None, None)
    assert isinstance(excinfo.value, FormatResolutionError)

def test_results_formats():
#==========================
    assert resolve_results_format('tsv') == QueryResultsFormat.TSV
    assert resolve_results_format('csv') == QueryResultsFormat.CSV
    assert resolve_results_format('json') == QueryResultsFormat.JSON
    assert resolve_results_format('xml') == QueryResultsFormat.XML

def test_tables_are_separate():
#==============================
    with pytest.raises(UnknownFormat):
        resolve_rdf_format('csv')
    with pytest.raises(UnknownFormat):
        resolve_results_format('ttl')

def test_file_extension():
#=========================
    assert file_extension('data/file1.ttl') == 'ttl'
    assert file_extension('/tmp/archive.tar.nq') == 'nq'
    assert file_extension('README') is None
    assert file_extension('trailing.') is None

#===============================================================================
#===============================================================================
