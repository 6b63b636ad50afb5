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
Recursion drivers for integrals over effective core potentials (ECPs).

The local part of the ECP ("U_L") recurses like a one-center Gaussian
weighted overlap. The semi-local (projected) part ("U_l") carries the
projector angular momentum l as the order of the operator, and each
recursion step sums over lower projector orders with bounds
floor((l-1)/2) and floor((l-2)/2).
"""
from obarec.factor import factor
from obarec.rational import rational
from obarec.distribution import recursion_distribution
from obarec.drivers.base import recursion_driver

class local_ecp_driver(recursion_driver):
    """
    Recursion for local ECP integrals ( a | U_L | b ):

        ( a+1_i | U_L | b ) = RA_i ( a | U_L | b ) + a_i/xi ( a-1_i | U_L | b )
        ( 0 | U_L | b+1_i ) = RB_i ( 0 | U_L | b ) + b_i/xi ( 0 | U_L | b-1_i )
    """
    integrand_name = 'U_L'

    def bra_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,0)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        dist.add( tval.add( factor('RA','ra',self.coord(axis)) ) )
        rval = tval.shift(axis,-1,0)
        if rval is not None:
            dist.add( rval.add( factor('1/xi','fxi'), tval[0][axis] ) )
        return dist

    def ket_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,1)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        dist.add( tval.add( factor('RB','rb',self.coord(axis)) ) )
        rval = tval.shift(axis,-1,1)
        if rval is not None:
            dist.add( rval.add( factor('1/xi','fxi'), tval[1][axis] ) )
        return dist

    def steps(self,integral):
        return [ ( 0, self.bra_vrr ), ( 1, self.ket_vrr ) ]

def _add_repeated(term,f,count):
    for i in range( count ):
        term = term.add(f)
    return term

class projected_ecp_driver(recursion_driver):
    """
    Recursion for projected ECP integrals ( a | U_l | b ), with the
    projector angular momentum l stored as the operator order.

    A step on the bra center ( a+1_i | U_l | b ) produces
        * two terms in ( a | U_l | b ) weighted by RA_i,
        * two terms in ( a-1_i | U_l | b ) if a_i > 0,
        * for k = 0 .. floor((l-1)/2), a term in ( a | U_(l-2k-1) | b )
          weighted by RB_i and, if b_i > 0, a second term in the same
          integral weighted by b_i/(2b),
        * for k = 0 .. floor((l-2)/2), a term in ( a | U_(l-2k-2) | b )
          weighted by -RA_i and, if a_i > 0, a second term in the same
          integral weighted by -a_i/(2a),
    where the summation terms carry (2l+1) b/z, powers of 2ab/z and the
    counters m, p and q.

    A step on the ket center ( a | U_l | b+1_i ) has the RB_i, b/z and p
    counterparts of the first four terms, a single RA_i weighted term for
    each k of the (l-1)/2 sum, and for each k of the (l-2)/2 sum a -RB_i
    weighted term plus, if a_i > 0, a second term weighted by -b_i/(2b).
    The second summation terms refer to the same integral as the first,
    i.e. the index checked only decides whether the term is present.
    """
    integrand_name = 'U_l'

    def _sum_factors(self,term,weight,multiplier,npowers,nm,np):
        term = term.add( weight, multiplier )
        term = _add_repeated( term, factor('2ab/z','f2abz'), npowers )
        term = _add_repeated( term, factor('m','m'), nm )
        term = _add_repeated( term, factor('p','p'), np )
        return term.add( factor('q','q') )

    def bra_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,0)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        coord = self.coord(axis)
        ra = factor('RA','ra',coord)
        rb = factor('RB','rb',coord)
        fbzi = factor('b/z','fbzi')
        dist.add( tval.add( ra ).add( factor('a-z/z','faz') ) )
        x2val = tval.add( ra ).add( factor('a','fa'), 2 ).add( fbzi ).add( fbzi )
        dist.add( x2val.add( factor('m','m') ) )
        na = tval[0][axis]
        nb = tval[1][axis]
        rval = tval.shift(axis,-1,0)
        if rval is not None:
            dist.add( rval.add( factor('1/2z','fzi'), na ) )
            dist.add( rval.add( fbzi, na ).add( fbzi ).add( factor('m','m') ) )
        l = term.order()
        # (l - 1) / 2 terms
        for k in range( (l-1)//2 + 1 ):
            rkval = tval.shift_order(-2*k-1)
            if rkval is None:
                continue
            dist.add( self._sum_factors( rkval.add( rb ), fbzi, 2*l+1, 2*k, k, k ) )
            # b-1_i only guards the term, the integral is not lowered
            if rkval.shift(axis,-1,1) is not None:
                x6val = rkval.add( factor('1/b','fbi'), rational(nb,2) )
                dist.add( self._sum_factors( x6val, fbzi, 2*l+1, 2*k, k, k ) )
        # (l - 2) / 2 terms
        for k in range( (l-2)//2 + 1 ):
            rkval = tval.shift_order(-2*k-2)
            if rkval is None:
                continue
            dist.add( self._sum_factors( rkval.add( ra, -1 ), fbzi, 2*l+1, 2*k+1, k+1, k ) )
            if rkval.shift(axis,-1,0) is not None:
                x8val = rkval.add( factor('1/a','fai'), rational(-na,2) )
                dist.add( self._sum_factors( x8val, fbzi, 2*l+1, 2*k+1, k+1, k ) )
        return dist

    def ket_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,1)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        coord = self.coord(axis)
        ra = factor('RA','ra',coord)
        rb = factor('RB','rb',coord)
        fazi = factor('a/z','fazi')
        dist.add( tval.add( rb ).add( factor('b-z/z','fbz') ) )
        x2val = tval.add( rb ).add( factor('b','fb'), 2 ).add( fazi ).add( fazi )
        dist.add( x2val.add( factor('p','p') ) )
        nb = tval[1][axis]
        rval = tval.shift(axis,-1,1)
        if rval is not None:
            dist.add( rval.add( factor('1/2z','fzi'), nb ) )
            dist.add( rval.add( fazi, nb ).add( fazi ).add( factor('p','p') ) )
        l = term.order()
        # (l - 1) / 2 terms
        for k in range( (l-1)//2 + 1 ):
            rkval = tval.shift_order(-2*k-1)
            if rkval is None:
                continue
            dist.add( self._sum_factors( rkval.add( ra ), fazi, 2*l+1, 2*k, k, k ) )
        # (l - 2) / 2 terms
        for k in range( (l-2)//2 + 1 ):
            rkval = tval.shift_order(-2*k-2)
            if rkval is None:
                continue
            dist.add( self._sum_factors( rkval.add( rb, -1 ), fazi, 2*l+1, 2*k+1, k, k+1 ) )
            # Guarded by a-1_i on the bra center
            if rkval.shift(axis,-1,0) is not None:
                x8val = rkval.add( factor('1/b','fbi'), rational(-nb,2) )
                dist.add( self._sum_factors( x8val, fazi, 2*l+1, 2*k+1, k, k+1 ) )
        return dist

    def steps(self,integral):
        return [ ( 0, self.bra_vrr ), ( 1, self.ket_vrr ) ]

    def create_reduced_recursion(self,components):
        """Recursion group for components using the reduced bra and ket steps."""
        return reduced_projected_ecp_driver().create_recursion(components)

class reduced_projected_ecp_driver(projected_ecp_driver):
    """
    Reduced recursion for projected ECP integrals, in which the projector
    sums are absorbed into the precomputed factors fp (bra) and fm (ket):

        ( a+1_i | U_l | b ) = RA_i/a fp q ( a | U_l | b )
                            + a_i/(2a) 1/a fp q ( a-1_i | U_l | b )
    """
    def red_bra_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,0)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        fai = factor('1/a','fai')
        tail = [ fai, factor('fp','fp'), factor('q','q') ]
        x1val = tval.add( factor('RA','ra',self.coord(axis)) )
        for f in tail:
            x1val = x1val.add(f)
        dist.add( x1val )
        rval = tval.shift(axis,-1,0)
        if rval is not None:
            x2val = rval.add( fai, rational(tval[0][axis],2) )
            for f in tail:
                x2val = x2val.add(f)
            dist.add( x2val )
        return dist

    def red_ket_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,1)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        fbi = factor('1/b','fbi')
        tail = [ fbi, factor('fm','fm'), factor('q','q') ]
        x1val = tval.add( factor('RB','rb',self.coord(axis)) )
        for f in tail:
            x1val = x1val.add(f)
        dist.add( x1val )
        rval = tval.shift(axis,-1,1)
        if rval is not None:
            x2val = rval.add( fbi, rational(tval[1][axis],2) )
            for f in tail:
                x2val = x2val.add(f)
            dist.add( x2val )
        return dist

    def steps(self,integral):
        return [ ( 0, self.red_bra_vrr ), ( 1, self.red_ket_vrr ) ]
