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
from fractions import Fraction
from obarec import classtools
from obarec.factor import factor
from obarec.integral import integral_component
from obarec.rational import rational, rational_label

class recursion_term(classtools.valuetools):
    """
    A single term of a recursion expansion: a reference to one integral
    component, weighted by an exact rational prefactor and multiplied by an
    ordered sequence of symbolic factors.

    Terms are immutable. add(), scale() and the shift methods return new
    terms, and the shift methods return None where the shifted integral
    does not exist (e.g. a negative Cartesian index), which is the normal
    way for a recursion driver to discover that a rewrite is not possible.
    """
    def __init__(self,integral,factors=(),prefactor=None):
        assert isinstance(integral,integral_component), 'integral must be an integral_component'
        factors = tuple( factors )
        for f in factors:
            assert isinstance(f,factor), 'factors must be factor objects'
        if prefactor is None:
            prefactor = rational(1)
        assert isinstance(prefactor,(int,Fraction)), 'prefactor must be an exact rational'
        self._integral = integral
        self._factors = factors
        self._prefactor = Fraction(prefactor)

    def __repr__(self):
        return 'recursion_term('+self.label()+')'

    def __str__(self):
        return self.label()

    def __getitem__(self,center):
        return self._integral[center]

    def key(self):
        return ( self._integral.key(), tuple( f.key() for f in self._factors ),\
                 ( self._prefactor.numerator, self._prefactor.denominator ) )

    def signature(self):
        """Key used to merge terms during simplification: the integral and
        the multiset of factors (the order of factors is irrelevant)."""
        return ( self._integral, tuple( sorted( self._factors ) ) )

    def integral(self):
        return self._integral

    def prefactor(self):
        return self._prefactor

    def factors(self):
        return self._factors

    def factor_powers(self):
        """List of ( factor, power ) tuples in canonical factor order."""
        out = []
        for f in sorted( self._factors ):
            if len( out ) > 0 and out[-1][0] == f:
                out[-1] = ( f, out[-1][1] + 1 )
            else:
                out.append( ( f, 1 ) )
        return out

    def integrand(self):
        return self._integral.integrand()

    def prefixes(self):
        return self._integral.prefixes()

    def order(self):
        return self._integral.order()

    def is_zero(self):
        return self._prefactor == 0

    def auxilary(self,center):
        return self._integral.auxilary(center)

    def label(self):
        out = [ rational_label( self._prefactor ) ]
        for f, power in self.factor_powers():
            if power == 1:
                out.append( f.label() )
            else:
                out.append( f.label()+'^'+str(power) )
        out.append( '['+self._integral.label(use_order=True)+']' )
        return ' * '.join( out )

    def add(self,f,multiplier=1):
        """Returns the term multiplied by factor f and by multiplier."""
        assert isinstance(f,factor), 'f must be a factor'
        return recursion_term(self._integral,self._factors+(f,),self._prefactor*Fraction(multiplier))

    def scale(self,multiplier):
        return recursion_term(self._integral,self._factors,self._prefactor*Fraction(multiplier))

    def multiply(self,other):
        """Returns the term other weighted by the factors and prefactor of this term."""
        assert isinstance(other,recursion_term), 'other must be a recursion_term'
        return recursion_term(other._integral,self._factors+other._factors,self._prefactor*other._prefactor)

    def _with_integral(self,integral):
        if integral is None:
            return None
        return recursion_term(integral,self._factors,self._prefactor)

    def replace(self,name):
        return self._with_integral( self._integral.replace(name) )

    def shift(self,axis,value,center):
        return self._with_integral( self._integral.shift(axis,value,center) )

    def shift_prefix(self,axis,value,center,clear_if_auxiliary=False):
        return self._with_integral( self._integral.shift_prefix(axis,value,center,clear_if_auxiliary) )

    def shift_operator(self,axis,value):
        return self._with_integral( self._integral.shift_operator(axis,value) )

    def shift_order(self,value):
        return self._with_integral( self._integral.shift_order(value) )
