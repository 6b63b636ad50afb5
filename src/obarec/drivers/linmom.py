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
from obarec.factor import factor
from obarec.distribution import recursion_distribution
from obarec.drivers.base import recursion_driver
from obarec.drivers.overlap import overlap_driver

class linear_momentum_driver(recursion_driver):
    """
    Linear momentum integrals ( a | p_i | b ), with p_i proportional to the
    derivative along axis i, are reduced to overlap integrals by
    differentiating the ket Gaussian:

        ( a | p_i | b ) = 2 eta ( a | b+1_i ) - b_i ( a | b-1_i )

    where the axis is the primary axis of the operator shape. Operators
    of higher shape are lowered one axis at a time.
    """
    integrand_name = 'p'
    shaped = True

    def __init__(self):
        recursion_driver.__init__(self)
        self._overlap_driver = overlap_driver()

    def is_auxilary(self,term,center):
        return term.integrand().shape().order() == 0

    def _lower(self,term,axis):
        oval = term.shift_operator(axis,-1)
        if oval.integrand().shape().order() == 0:
            oval = oval.replace('1')
        return oval

    def op_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        if axis != term.integrand().shape().primary():
            return None
        dist = recursion_distribution(term)
        oval = self._lower(term,axis)
        dist.add( oval.shift(axis,1,1).add( factor('eta','fz'), 2 ) )
        nb = term[1][axis]
        r2val = oval.shift(axis,-1,1)
        if r2val is not None:
            dist.add( r2val.scale(-nb) )
        return dist

    def steps(self,integral):
        return [ ( 1, self.op_vrr ) ]

    def delegates(self):
        return [ self._overlap_driver ]
