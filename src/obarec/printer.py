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
import sys
from obarec import classtools

def text(arg):
    """
    Returns the text representation of arg: the result of its label()
    method where available (e.g. recursion terms, integral classes),
    otherwise str( arg ).
    """
    try:
        return arg.label()
    except AttributeError:
        return str( arg )

class printer(classtools.classtools):
    """
    Line-based output of recursion expressions to a file or file-like
    object, with indentation and a line end string.
    """
    def __init__(self,endl=';',output_file=sys.stdout,tab=2):
        """
        endl:         line end string, added to the end of each line from printer.out().
        output_file:  file object or file-like object to be used for text output
                      (must be open for writing).
        tab:          number of blank spaces for each indent/outdent step.
        """
        self._end = endl
        self._file = output_file
        self._tab  = tab
        self._indent = 0
        self._max_indent = 80

    def out(self,arg,endl=None,output_file=None):
        """
        Writes the text representation of arg (see text()) at the current
        indentation, followed by the line end string.

        endl:         overrides the line end string for a single call
        output_file:  overrides the output file for a single call
        """
        if endl is None:
            endl = self._end
        if output_file is None:
            output_file = self._file
        print(self._indent*' '+text(arg), end=endl+'\n', file=output_file)

    def indent(self):
        assert self._indent + self._tab <= self._max_indent,\
                'indent greater than _max_indent ('+str(self._max_indent)+')'
        self._indent += self._tab

    def outdent(self):
        assert self._indent - self._tab >= 0, 'negative indent not allowed'
        self._indent -= self._tab

    def blankline(self,output_file=None):
        """Prints an empty line, without line end string or indentation."""
        if output_file is None:
            output_file = self._file
        print( '', end='\n', file=output_file )

    def indent_value(self):
        return self._indent
