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
Plain-text reference emitter for recursion groups and graphs.

Each expanded distribution is written as one assignment, e.g.

    buffer_1[p_x_s_0] = rpa_x * buffer_2[s_s_0];

where buffers are named per integral class by a namer object, and the
index in brackets is the label of the integral component. Unexpanded
distributions (base cases) are written as comments.
"""
from obarec import classtools
from obarec.printer import printer
from obarec.namer import namer
from obarec.rational import rational_literal
from obarec.families import is_known_integrand, needs_boys_function

class recursion_emitter(classtools.classtools):
    def __init__(self,printer_obj,buffer_namer=None):
        assert isinstance(printer_obj,printer), 'printer_obj must be a printer'
        if buffer_namer is None:
            buffer_namer = namer()
        assert isinstance(buffer_namer,namer), 'buffer_namer must be a namer'
        self._printer = printer_obj
        self._namer = buffer_namer

    def printer(self):
        return self._printer

    def namer(self):
        return self._namer

    def integral_str(self,integral):
        """Buffer reference of an integral component."""
        return self._namer( integral.integral_class() )+'['+integral.label(use_order=True)+']'

    def term_str(self,term,first=True):
        """
        Text of one term of an expansion. Factors are written in canonical
        order, powers as repeated products. A prefactor of 1 is omitted.
        For terms after the first, the sign is written as the joining
        operator.
        """
        prefactor = term.prefactor()
        if first:
            sign = '-' if prefactor < 0 else ''
        else:
            sign = ' - ' if prefactor < 0 else ' + '
        out = []
        if abs( prefactor ) != 1:
            out.append( rational_literal( abs( prefactor ) ) )
        for f in sorted( term.factors() ):
            out.append( f.label() )
        out.append( self.integral_str( term.integral() ) )
        return sign + ' * '.join( out )

    def distribution_out(self,dist):
        lhs = self.integral_str( dist.root().integral() )
        if dist.empty():
            self._printer.out( '// '+lhs+' is an auxiliary integral', endl='' )
            return
        rhs = []
        for i, term in enumerate( dist ):
            rhs.append( self.term_str( term, first = ( i == 0 ) ) )
        self._printer.out( lhs+' = '+''.join( rhs ) )

    def group_out(self,group):
        iclass = group.base()
        if iclass is None:
            return
        header = '// '+iclass.label()+' -> '+self._namer(iclass)
        root = group[0].root().integral()
        if is_known_integrand(root.base()) and needs_boys_function(root.base()):
            header += ' (Boys function)'
        self._printer.out( header, endl='' )
        self._printer.indent()
        for dist in group:
            self.distribution_out( dist )
        self._printer.outdent()

    def graph_out(self,graph):
        """Writes the vertices of graph in their current order, each
        preceded by the indexes of its children."""
        for i in range( graph.vertices() ):
            children = ', '.join( str(j) for j in graph.edges(i) )
            self._printer.out( '// vertex '+str(i)+' (children: '+children+')', endl='' )
            self.group_out( graph[i] )
