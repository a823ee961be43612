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

import argparse
import sys
from typing import BinaryIO, Optional, Sequence

#===============================================================================

from oxrq import __version__
from oxrq.options import Options
from oxrq.output import route_result, serialize_dataset
from oxrq.sources import CollectedInput, collect_input
from oxrq.sparql import dispatch
from oxrq.utils import Issue, SerializationError, configure_logging, log

#===============================================================================

def run(options: Options, stdin: BinaryIO, stdout: BinaryIO) -> CollectedInput:
#==============================================================================
    collected = collect_input(options, stdin)
    result = dispatch(collected.dataset, collected.query_text, collected.state.base_iri)
    dataset = route_result(result, stdout, options.output_format, collected.dataset)
    if dataset is not None:
        serialize_dataset(dataset, stdout, options.output_format, collected.state.prefixes)
    try:
        stdout.flush()
    except OSError as e:
        raise SerializationError(f'Unable to write output: {e}') from e
    return collected

#===============================================================================

def main(argv: Optional[Sequence[str]]=None):
    parser = argparse.ArgumentParser(prog='oxrq',
        description='Run a SPARQL query or update over RDF read from files and stdin')
    parser.add_argument('-v', '--version', action='version', version=__version__)
    parser.add_argument('-i', '--input-format', metavar='FORMAT',
        help='RDF format of stdin (ttl, nt, nq, rdf, trig, ...), defaults to Turtle')
    parser.add_argument('-o', '--output-format', metavar='FORMAT',
        help='Output RDF format (ttl, nt, nq, rdf, trig, ...) or SPARQL results format (tsv, csv, json, xml)')
    parser.add_argument('-b', '--base-iri', metavar='IRI', help='Base IRI used when parsing')
    parser.add_argument('-f', '--file-query', action='store_true',
        help="Treat QUERY as a file, a '.rq' file is read as the query")
    parser.add_argument('-n', '--no-stdin', action='store_true',
        help="Don't read from stdin when files are given (unless '-' is given as a file)")
    parser.add_argument('--debug', action='store_true', help='Show loading and operation details')
    parser.add_argument('query', metavar='QUERY', nargs='?',
        help="Query or update text (unless '--file-query' is used)")
    parser.add_argument('file', metavar='FILE', nargs='*', help="RDF file(s), '-' for stdin")

    args = parser.parse_intermixed_args(argv)
    options = Options.from_args(args)
    configure_logging(options.debug)

    try:
        run(options, sys.stdin.buffer, sys.stdout.buffer)
    except Issue as issue:
        log.error(issue.reason)
        sys.exit(1)

#===============================================================================

if __name__ == '__main__':
    main()

#===============================================================================
#===============================================================================
