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

class kinetic_energy_driver(recursion_driver):
    """
    Obara-Saika recursion for kinetic energy integrals ( a | T | b ).

    Each step lowers the angular momentum on one center in the same way
    as the overlap recursion, and adds overlap terms weighted by the
    reduced exponent zeta = a_e b_e / ( a_e + b_e ):

        ( a+1_i | T | b ) = 2 zeta ( a+1_i | b )
                          + PA_i ( a | T | b )
                          + a_i/(2 eta) ( a-1_i | T | b )
                          + b_i/(2 eta) ( a | T | b-1_i )
                          - a_i zeta/b_e ( a-1_i | b )

    The overlap terms are reduced by the overlap driver.
    """
    integrand_name = 'T'

    def __init__(self):
        recursion_driver.__init__(self)
        self._overlap_driver = overlap_driver()

    def bra_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,0)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        dist.add( term.replace('1').add( factor('zeta','fz'), 2 ) )
        dist.add( tval.add( factor('PA','rpa',self.coord(axis)) ) )
        na = tval[0][axis]
        r2val = tval.shift(axis,-1,0)
        if r2val is not None:
            dist.add( r2val.add( factor('1/eta','fe'), rational(na,2) ) )
        nb = tval[1][axis]
        r3val = tval.shift(axis,-1,1)
        if r3val is not None:
            dist.add( r3val.add( factor('1/eta','fe'), rational(nb,2) ) )
        if r2val is not None:
            x4val = r2val.replace('1').add( factor('zeta','fz'), 2 )
            dist.add( x4val.add( factor('1/b_e','fbe'), rational(-na,2) ) )
        return dist

    def ket_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,1)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        dist.add( term.replace('1').add( factor('zeta','fz'), 2 ) )
        dist.add( tval.add( factor('PB','rpb',self.coord(axis)) ) )
        nb = tval[1][axis]
        r2val = tval.shift(axis,-1,1)
        if r2val is not None:
            dist.add( r2val.add( factor('1/eta','fe'), rational(nb,2) ) )
            x3val = r2val.replace('1').add( factor('zeta','fz'), 2 )
            dist.add( x3val.add( factor('1/k_e','fke'), rational(-nb,2) ) )
        return dist

    def steps(self,integral):
        return [ ( 0, self.bra_vrr ), ( 1, self.ket_vrr ) ]

    def delegates(self):
        return [ self._overlap_driver ]
