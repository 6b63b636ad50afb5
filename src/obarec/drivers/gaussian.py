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
"""
Recursion drivers for overlap integrals over three Gaussians.

The third Gaussian, exp(-c |r-C|^2), is either folded into the operator
"G(r)" of a two-center integral ( a | G(r) | b ), or carries a shell of
its own in a three-center integral ( a | G(r) | b c ). In both cases the
Obara-Saika relation uses the center G of the product of the three
Gaussians and gfe = 1/(2 (a_e + b_e + c_e)).

The operators "GX(r)" (gradient of the Gaussian with respect to C),
"GR2(r)" (|r-C|^2 times the Gaussian) and "GR.R2(r)" ((r-C)_i |r-C|^2
times the Gaussian) are reduced to "G(r)" integrals by the auxiliary
drivers below.
"""
from obarec.factor import factor
from obarec.tensor import AXES
from obarec.distribution import recursion_distribution
from obarec.drivers.base import recursion_driver

GAUSSIAN_INTEGRAND = 'G(r)'

# Distance from the center of the product Gaussian, per center
_CENTER_DISTANCES = [ ( 'GA', 'ga' ), ( 'GB', 'gb' ), ( 'GC', 'gc' ) ]

class three_center_overlap_driver(recursion_driver):
    """
    Recursion for ( a | G(r) | b ) and ( a | G(r) | b c ). On center k:

        ( .. x+1_i .. ) = GX_i ( .. x .. ) + sum_j n_j gfe ( .. j-1_i .. )

    where the sum runs over all centers j and n_j is the Cartesian index
    of center j along axis i. Centers are reduced in order.
    """
    integrand_name = GAUSSIAN_INTEGRAND
    ncenters = ( 2, 3 )

    def vrr(self,term,axis,center):
        if not self.is_family(term):
            return None
        tval = term.shift(axis,-1,center)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        name, label = _CENTER_DISTANCES[center]
        dist.add( tval.add( factor(name,label,self.coord(axis)) ) )
        for j in range( tval.integral().ncenters() ):
            rval = tval.shift(axis,-1,j)
            if rval is not None:
                dist.add( rval.add( factor('1/geta','gfe'), tval[j][axis] ) )
        return dist

    def bra_vrr(self,term,axis):
        return self.vrr(term,axis,0)

    def ket_vrr(self,term,axis):
        return self.vrr(term,axis,1)

    def ket_c_vrr(self,term,axis):
        return self.vrr(term,axis,2)

    def steps(self,integral):
        steps = [ ( 0, self.bra_vrr ), ( 1, self.ket_vrr ) ]
        if integral.ncenters() == 3:
            steps.append( ( 2, self.ket_c_vrr ) )
        return steps

class _gaussian_operator_driver(recursion_driver):
    """Common part of the drivers reducing an operator to "G(r)"."""
    def __init__(self):
        recursion_driver.__init__(self)
        self._overlap_driver = three_center_overlap_driver()

    def is_family(self,term):
        # Operator shapes above order 1 are not supported
        return recursion_driver.is_family(self,term) and term.integrand().shape().order() <= 1

    def is_auxilary(self,term,center):
        # Terms of the family are rewritten whatever their angular momentum
        return not self.is_family(term)

    def delegates(self):
        return [ self._overlap_driver ]

    def _add_lowered(self,dist,rval,axis,f):
        """Adds rval lowered along axis on the bra and on the ket center,
        weighted by f and the Cartesian index lowered."""
        for center in ( 0, 1 ):
            lowered = rval.shift(axis,-1,center)
            if lowered is not None:
                dist.add( lowered.add( f, rval[center][axis] ) )

class three_center_overlap_gradient_driver(_gaussian_operator_driver):
    """
    Gradient of the Gaussian with respect to its center, "GX(r)" with an
    operator shape of order 1:

        ( a | GX_i | b ) = 2 c_e [ GC_i ( a | G | b ) + a_i gfe ( a-1_i | G | b )
                                                       + b_i gfe ( a | G | b-1_i ) ]
    """
    integrand_name = 'GX(r)'
    shaped = True

    def aux_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift_operator(axis,-1)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        rval = tval.replace(GAUSSIAN_INTEGRAND).add( factor('c_e','tce'), 2 )
        dist.add( rval.add( factor('GC','gc',self.coord(axis)) ) )
        self._add_lowered(dist,rval,axis,factor('1/geta','gfe'))
        return dist

    def steps(self,integral):
        return [ ( 0, self.aux_vrr ) ]

class three_center_r2_driver(_gaussian_operator_driver):
    """
    |r-C|^2 times the Gaussian, "GR2(r)", expanded over all three axes at
    once:

        ( a | GR2 | b ) = GC^2 ( a | G | b )
            + sum_i [ 2 a_i gfe GC_i ( a-1_i | G | b ) + 2 b_i gfe GC_i ( a | G | b-1_i )
                      + 2 a_i b_i gfe^2 ( a-1_i | G | b-1_i )
                      + a_i (a_i-1) gfe^2 ( a-2_i | G | b ) + b_i (b_i-1) gfe^2 ( a | G | b-2_i ) ]
            + 3 gfe ( a | G | b )

    The expansion is the same for every axis argument.
    """
    integrand_name = 'GR2(r)'

    def aux_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.replace(GAUSSIAN_INTEGRAND)
        dist = recursion_distribution(term)
        gfe = factor('1/geta','gfe')
        gfe2 = factor('1/geta2','gfe2')
        dist.add( tval.add( factor('r2gc','rgc2') ) )
        for center in ( 0, 1 ):
            for i in AXES:
                rval = tval.shift(i,-1,center)
                if rval is not None:
                    dist.add( rval.add( factor('GC','gc',self.coord(i)), 2 ).add( gfe, tval[center][i] ) )
        for i in AXES:
            rval = tval.shift(i,-1,0)
            if rval is not None:
                rval = rval.shift(i,-1,1)
            if rval is not None:
                dist.add( rval.add( gfe2, 2*tval[0][i]*tval[1][i] ) )
        for center in ( 0, 1 ):
            for i in AXES:
                rval = tval.shift(i,-2,center)
                if rval is not None:
                    n = tval[center][i]
                    dist.add( rval.add( gfe2, n*(n-1) ) )
        dist.add( tval.add( gfe, 3 ) )
        return dist

    def steps(self,integral):
        return [ ( 0, self.aux_vrr ) ]

class three_center_rr2_driver(_gaussian_operator_driver):
    """
    (r-C)_i |r-C|^2 times the Gaussian, "GR.R2(r)" with an operator shape
    of order 1:

        ( a | GR.R2_i | b ) = GC_i ( a | GR2 | b ) + a_i gfe ( a-1_i | GR2 | b )
                                                   + b_i gfe ( a | GR2 | b-1_i )
                            + gfe GC_i ( a | G | b ) + a_i gfe^2 ( a-1_i | G | b )
                                                   + b_i gfe^2 ( a | G | b-1_i )
    """
    integrand_name = 'GR.R2(r)'
    shaped = True

    def __init__(self):
        _gaussian_operator_driver.__init__(self)
        self._r2_driver = three_center_r2_driver()

    def aux_vrr(self,term,axis):
        if not self.is_family(term):
            return None
        tval = term.shift_operator(axis,-1)
        if tval is None:
            return None
        dist = recursion_distribution(term)
        gc = factor('GC','gc',self.coord(axis))
        gfe = factor('1/geta','gfe')
        r1val = tval.replace('GR2(r)')
        dist.add( r1val.add( gc ) )
        self._add_lowered(dist,r1val,axis,gfe)
        r4val = tval.replace(GAUSSIAN_INTEGRAND)
        dist.add( r4val.add( gc ).add( gfe ) )
        self._add_lowered(dist,r4val,axis,factor('1/geta2','gfe2'))
        return dist

    def steps(self,integral):
        return [ ( 0, self.aux_vrr ) ]

    def delegates(self):
        return [ self._r2_driver ]
