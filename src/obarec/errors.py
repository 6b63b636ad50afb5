#!/usr/bin/env python3
### LICENSE INFORMATION
### This file is part of Obarec, a molecular integral recursion compiler
### Copyright (C) 2016 James C. Womack
### 
### Obarec is free software: you can redistribute it and/or modify
### it under the terms of the GNU General Public License as published by
### the Free Software Foundation, either version 3 of the License, or
### (at your option) any later version.
### 
### Obarec is distributed in the hope that it will be useful,
### but WITHOUT ANY WARRANTY; without even the implied warranty of
### MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
### GNU General Public License for more details.
### 
### You should have received a copy of the GNU General Public License
### along with Obarec.  If not, see <http://www.gnu.org/licenses/>.
### 
### See the file named LICENSE for full details.
"""
Exceptions raised by the recursion algebra.

Rewrites that are not possible along a given axis or center are not
errors: the shift methods return None and the drivers try another axis.
The exceptions below signal conditions which must stop code generation.
"""

class RecursionConsistencyError(Exception):
    """Custom exception class for internal consistency violations in the
    recursion algebra, e.g. a term which is not in a base case but for
    which no recursion axis yields a rewrite. Generating code from a
    partial expansion would give wrong integrals, so this is never
    caught inside the package."""
    def __init__(self,message,value=None):
        Exception.__init__(self,message)
        self._message = message
        self._value = value

    def message(self):
        return self._message

    def value(self):
        return self._value

class UnknownFamilyError(Exception):
    """Custom exception class for requests which cannot be handled by any
    registered operator family, e.g. an unsupported integrand or a batch
    of integral components belonging to different families."""
    def __init__(self,message,value=None):
        Exception.__init__(self,message)
        self._message = message
        self._value = value

    def message(self):
        return self._message

    def value(self):
        return self._value
