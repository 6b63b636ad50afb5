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
from obarec.rational import rational
from obarec.distribution import recursion_distribution
from obarec.drivers.base import recursion_driver

class nuclear_potential_driver(recursion_driver):
    """
    Obara-Saika recursion for nuclear potential integrals ( a | A | b )^(m),
    where m is the Boys function order carried by the operator:

        ( a+1_i | A | b )^(m) = PA_i ( a | A | b )^(m) - PC_i ( a | A | b )^(m+1)
                + a_i/(2 eta) [ ( a-1_i | A | b )^(m) - ( a-1_i | A | b )^(m+1) ]
                + b_i/(2 eta) [ ( a | A | b-1_i )^(m) - ( a | A | b-1_i )^(m+1) ]

    and the analogous relation with PB_i on the ket center. The base case
    ( 0 | A | 0 )^(m) is evaluated from the Boys function.
    """
    integrand_name = 'A'

    def _add_pair(self,dist,tval,na,center,axis):
        # Terms coupling to the lowered angular momentum on center
        rval = tval.shift(axis,-1,center)
        if rval is not None:
            dist.add( rval.add( factor('1/eta','fe'), rational(na,2) ) )
            dist.add( rval.shift_order(1).add( factor('1/eta','fe'), rational(-na,2) ) )

    def _vrr(self,term,axis,center,distance_factor):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,center)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        coord = self.coord(axis)
        dist.add( tval.add( factor(distance_factor[0],distance_factor[1],coord) ) )
        dist.add( tval.shift_order(1).add( factor('PC','rpc',coord), -1 ) )
        self._add_pair(dist,tval,tval[center][axis],center,axis)
        if center == 0:
            self._add_pair(dist,tval,tval[1][axis],1,axis)
        return dist

    def bra_vrr(self,term,axis):
        return self._vrr(term,axis,0,( 'PA', 'rpa' ))

    def ket_vrr(self,term,axis):
        return self._vrr(term,axis,1,( 'PB', 'rpb' ))

    def steps(self,integral):
        return [ ( 0, self.bra_vrr ), ( 1, self.ket_vrr ) ]

class nuclear_potential_geom_driver(nuclear_potential_driver):
    """
    Recursion for integrals over the nuclear potential gradient operator
    ( a | AG_c | b )^(m), where the tensorial shape c of the operator
    counts the derivatives with respect to the nuclear position C. In
    addition to the nuclear potential terms, each step lowers the operator
    shape along the recursion axis:

        + c_i ( a | AG_(c-1_i) | b )^(m+1)

    An operator with zero shape is the nuclear potential "A", which is
    reduced by the nuclear_potential_driver.
    """
    integrand_name = 'AG'
    shaped = True

    def __init__(self):
        nuclear_potential_driver.__init__(self)
        self._nuclear_potential_driver = nuclear_potential_driver()

    def _vrr(self,term,axis,center,distance_factor):
        dist = nuclear_potential_driver._vrr(self,term,axis,center,distance_factor)
        if dist is None:
            return None
        tval = term.shift(axis,-1,center)
        nc = tval.integrand().shape()[axis]
        oval = tval.shift_operator(axis,-1)
        if oval is not None:
            oval = oval.shift_order(1)
            if oval.integrand().shape().order() == 0:
                oval = oval.replace('A')
            dist.add( oval.scale(nc) )
        return dist

    def delegates(self):
        return [ self._nuclear_potential_driver ]
