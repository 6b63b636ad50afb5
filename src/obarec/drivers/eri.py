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

ERI_INTEGRAND = "1/|r-r'|"

class electron_repulsion_driver(recursion_driver):
    """
    Vertical recursion for two-center electron repulsion integrals
    ( a | 1/|r-r'| | b )^(m), where both centers carry one Gaussian and m is
    the Boys function order:

        ( a+1_i | b )^(m) = PA_i ( a | b )^(m+1)
                + a_i/b_e ( a-1_i | b )^(m) - a_i zeta/b_e^2 ( a-1_i | b )^(m+1)
                + b_i/eta ( a | b-1_i )^(m+1)

    and on the ket center

        ( 0 | b+1_i )^(m) = PB_i ( 0 | b )^(m+1)
                + b_i/k_e ( 0 | b-1_i )^(m) - b_i zeta/k_e^2 ( 0 | b-1_i )^(m+1)
    """
    integrand_name = ERI_INTEGRAND

    def bra_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,0)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        dist.add( tval.shift_order(1).add( factor('PA','pa',self.coord(axis)) ) )
        na = tval[0][axis]
        r2val = tval.shift(axis,-1,0)
        if r2val is not None:
            dist.add( r2val.add( factor('1/b_e','fbe'), na ) )
            dist.add( r2val.shift_order(1).add( factor('zeta/b_e^2','fz_be'), -na ) )
        nb = tval[1][axis]
        r4val = tval.shift(axis,-1,1)
        if r4val is not None:
            dist.add( r4val.shift_order(1).add( factor('1/eta','fe'), nb ) )
        return dist

    def ket_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,1)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        dist.add( tval.shift_order(1).add( factor('PB','pb',self.coord(axis)) ) )
        nb = tval[1][axis]
        r2val = tval.shift(axis,-1,1)
        if r2val is not None:
            dist.add( r2val.add( factor('1/k_e','fke'), nb ) )
            dist.add( r2val.shift_order(1).add( factor('zeta/k_e^2','fz_ke'), -nb ) )
        return dist

    def steps(self,integral):
        return [ ( 0, self.bra_vrr ), ( 1, self.ket_vrr ) ]
