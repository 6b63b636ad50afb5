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
from obarec.drivers.eri import ERI_INTEGRAND

class three_center_electron_repulsion_driver(recursion_driver):
    """
    Recursion for three-center electron repulsion integrals
    ( a | 1/|r-r'| | c d )^(m), with centers a (bra), c and d (ket).

    The recursion is applied in three steps:

        ket HRR on c:  ( a | c+1_i d ) = ( a | c d+1_i ) - DC_i ( a | c d )
        bra VRR on a:  ( a+1_i | 0 d )^(m) = WA_i ( a | 0 d )^(m+1)
                         + a_i/b_e ( a-1_i | 0 d )^(m)
                         - a_i zeta/b_e^2 ( a-1_i | 0 d )^(m+1)
                         + d_i/(b_e+nu) ( a | 0 d-1_i )^(m+1)
        ket VRR on d:  ( 0 | 0 d+1_i )^(m) = QD_i ( 0 | 0 d )^(m)
                         + WQ_i ( 0 | 0 d )^(m+1)
                         + d_i/nu ( 0 | 0 d-1_i )^(m)
                         - d_i zeta_nu^2 ( 0 | 0 d-1_i )^(m+1)
    """
    integrand_name = ERI_INTEGRAND
    ncenters = 3

    def ket_hrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,1)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        dist.add( tval.add( factor('DC','cd',self.coord(axis)), -1 ) )
        dist.add( tval.shift(axis,1,2) )
        return dist

    def bra_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,0)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        r1val = tval.shift_order(1)
        dist.add( r1val.add( factor('WA','wa',self.coord(axis)) ) )
        na = r1val[0][axis]
        r2val = tval.shift(axis,-1,0)
        if r2val is not None:
            dist.add( r2val.add( factor('1/b_e','fbe'), na ) )
            dist.add( r2val.shift_order(1).add( factor('zeta/b_e^2','fz_be'), -na ) )
        nd = r1val[2][axis]
        xval = tval.shift(axis,-1,2)
        if xval is not None:
            dist.add( xval.shift_order(1).add( factor('1/(b_e+nu)','fi_acd'), nd ) )
        return dist

    def ket_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,2)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        coord = self.coord(axis)
        dist.add( tval.add( factor('QD','qd',coord) ) )
        dist.add( tval.shift_order(1).add( factor('WQ','wq',coord) ) )
        nd = tval[2][axis]
        r3val = tval.shift(axis,-1,2)
        if r3val is not None:
            dist.add( r3val.add( factor('1/nu','fi_cd'), nd ) )
            dist.add( r3val.shift_order(1).add( factor('zeta_nu^2','fzi_cd'), -nd ) )
        return dist

    def steps(self,integral):
        return [ ( 1, self.ket_hrr ), ( 0, self.bra_vrr ), ( 2, self.ket_vrr ) ]
