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
from obarec.drivers.overlap import overlap_driver

class multipole_driver(recursion_driver):
    """
    Obara-Saika recursion for multipole integrals ( a | r_c | b ), where c
    is the Cartesian shape of the multipole operator (r - C)^c:

        ( a+1_i | r_c | b ) = PA_i ( a | r_c | b )
                            + a_i/(2 eta) ( a-1_i | r_c | b )
                            + b_i/(2 eta) ( a | r_c | b-1_i )
                            + c_i/(2 eta) ( a | r_(c-1_i) | b )

    with the analogous relation on the ket center. Lowering the operator to
    zero shape gives an overlap integral, reduced by the overlap driver.
    """
    integrand_name = 'r'
    shaped = True

    def __init__(self):
        recursion_driver.__init__(self)
        self._overlap_driver = overlap_driver()

    def _operator_term(self,dist,tval,axis):
        nc = tval.integrand().shape()[axis]
        oval = tval.shift_operator(axis,-1)
        if oval is not None:
            if oval.integrand().shape().order() == 0:
                oval = oval.replace('1')
            dist.add( oval.add( factor('1/eta','fe'), rational(nc,2) ) )

    def bra_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,0)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        dist.add( tval.add( factor('PA','rpa',self.coord(axis)) ) )
        na = tval[0][axis]
        r2val = tval.shift(axis,-1,0)
        if r2val is not None:
            dist.add( r2val.add( factor('1/eta','fe'), rational(na,2) ) )
        nb = tval[1][axis]
        r3val = tval.shift(axis,-1,1)
        if r3val is not None:
            dist.add( r3val.add( factor('1/eta','fe'), rational(nb,2) ) )
        self._operator_term(dist,tval,axis)
        return dist

    def ket_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,1)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        dist.add( tval.add( factor('PB','rpb',self.coord(axis)) ) )
        nb = tval[1][axis]
        r2val = tval.shift(axis,-1,1)
        if r2val is not None:
            dist.add( r2val.add( factor('1/eta','fe'), rational(nb,2) ) )
        self._operator_term(dist,tval,axis)
        return dist

    def steps(self,integral):
        return [ ( 0, self.bra_vrr ), ( 1, self.ket_vrr ) ]

    def delegates(self):
        return [ self._overlap_driver ]
