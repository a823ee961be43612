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

from argparse import Namespace
from dataclasses import dataclass
from typing import Optional

#===============================================================================

STDIN_SENTINEL = '-'

#===============================================================================

@dataclass(frozen=True)
class Options:
    query: Optional[str] = None
    files: tuple[str, ...] = ()
    input_format: Optional[str] = None
    output_format: Optional[str] = None
    base_iri: Optional[str] = None
    file_query: bool = False
    no_stdin: bool = False
    debug: bool = False

    @classmethod
    def from_args(cls, args: Namespace) -> 'Options':
    #================================================
        return cls(query=args.query,
                   files=tuple(args.file),
                   input_format=args.input_format,
                   output_format=args.output_format,
                   base_iri=args.base_iri,
                   file_query=args.file_query,
                   no_stdin=args.no_stdin,
                   debug=args.debug)

#===============================================================================
#===============================================================================
