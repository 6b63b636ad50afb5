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

class overlap_driver(recursion_driver):
    """
    Obara-Saika recursion for two-center overlap integrals ( a | 1 | b ):

        ( a+1_i | b ) = PA_i ( a | b ) + a_i/(2 eta) ( a-1_i | b )
                                      + b_i/(2 eta) ( a | b-1_i )
        ( 0 | b+1_i ) = PB_i ( 0 | b ) + b_i/(2 eta) ( 0 | b-1_i )

    with eta the sum of the exponents. Recursion is applied on the bra
    center first, then on the ket center.
    """
    integrand_name = '1'

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
        return dist

    def steps(self,integral):
        return [ ( 0, self.bra_vrr ), ( 1, self.ket_vrr ) ]
