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
from obarec.drivers.npot import nuclear_potential_driver

class electric_field_driver(recursion_driver):
    """
    Recursion for electric field integrals ( a | A1_c | b )^(m), i.e.
    derivatives of the nuclear potential with respect to the field point.
    Compared to the nuclear potential gradient recursion the 1/eta
    factors carry the full angular momentum (the factor 1/2 is part of the
    code label "fe"), and each step lowers the operator shape:

        + c_i ( a | A1_(c-1_i) | b )^(m+1)

    An operator with zero shape is the nuclear potential "A", which is
    reduced by the nuclear_potential_driver.
    """
    integrand_name = 'A1'
    shaped = True

    def __init__(self):
        recursion_driver.__init__(self)
        self._nuclear_potential_driver = nuclear_potential_driver()

    def _add_pair(self,dist,tval,n,center,axis):
        rval = tval.shift(axis,-1,center)
        if rval is not None:
            dist.add( rval.add( factor('1/eta','fe'), n ) )
            dist.add( rval.shift_order(1).add( factor('1/eta','fe'), -n ) )

    def _vrr(self,term,axis,center,distance_factor):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,center)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        coord = self.coord(axis)
        dist.add( tval.add( factor(distance_factor[0],distance_factor[1],coord) ) )
        dist.add( tval.shift_order(1).add( factor('PC','pc',coord), -1 ) )
        self._add_pair(dist,tval,tval[center][axis],center,axis)
        if center == 0:
            self._add_pair(dist,tval,tval[1][axis],1,axis)
        nc = tval.integrand().shape()[axis]
        oval = tval.shift_operator(axis,-1)
        if oval is not None:
            oval = oval.shift_order(1)
            if oval.integrand().shape().order() == 0:
                oval = oval.replace('A')
            dist.add( oval.scale(nc) )
        return dist

    def bra_vrr(self,term,axis):
        return self._vrr(term,axis,0,( 'PA', 'pa' ))

    def ket_vrr(self,term,axis):
        return self._vrr(term,axis,1,( 'PB', 'pb' ))

    def steps(self,integral):
        return [ ( 0, self.bra_vrr ), ( 1, self.ket_vrr ) ]

    def delegates(self):
        return [ self._nuclear_potential_driver ]
