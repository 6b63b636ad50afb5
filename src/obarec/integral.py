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
Integral components and integral classes.

An integral_component is one Cartesian component of a (possibly
differentiated) molecular integral over 1-4 centers, e.g. the overlap
component ( p_x | d_xy ). An integral_class is the shell-level
description ( P | D ) of all such components, used to group the
components that are evaluated together.

Geometric derivative prefixes are represented explicitly by one of two
classes:
    no_derivative   no center is differentiated
    derivative      one tensor_component per center, where a zero
                    component means the center is not differentiated
"""
import itertools
from obarec import classtools
from obarec.tensor import tensor, tensor_component
from obarec.operator import operator_component

CENTER_LABELS = 'abcd'

class no_derivative(classtools.valuetools):
    """Prefixes of an integral which is not differentiated."""
    def __repr__(self):
        return 'no_derivative()'

    def key(self):
        return ()

    def empty(self):
        return True

    def shape(self,center):
        return tensor_component()

    def shapes(self):
        return ()

    def orders(self):
        return ()

    def label(self):
        return ''

    def shift(self,axis,value,center,ncenters,clear_if_auxiliary=False):
        """Raising a prefix creates a derivative over ncenters centers;
        lowering is never possible."""
        assert 0 <= center < ncenters, 'center out of range'
        if value <= 0:
            return None
        shapes = [ tensor_component() for i in range(ncenters) ]
        shapes[center] = shapes[center].shift(axis,value)
        return derivative(shapes)

class derivative(classtools.valuetools):
    """Geometric derivative prefixes, one tensor_component per center."""
    def __init__(self,shapes):
        shapes = tuple( shapes )
        assert 1 <= len( shapes ) <= 4, 'derivative prefixes require 1-4 centers'
        for shape in shapes:
            assert isinstance(shape,tensor_component), 'prefix shapes must be tensor_component objects'
        self._shapes = shapes

    def __repr__(self):
        return 'derivative('+repr(list(self._shapes))+')'

    def key(self):
        return tuple( shape.key() for shape in self._shapes )

    def empty(self):
        return False

    def shape(self,center):
        return self._shapes[center]

    def shapes(self):
        return self._shapes

    def orders(self):
        return tuple( shape.order() for shape in self._shapes )

    def label(self):
        return 'd'+'_'.join( shape.label() for shape in self._shapes )

    def shift(self,axis,value,center,ncenters=None,clear_if_auxiliary=False):
        """
        Shifts the prefix on center along axis. Returns None if the result is
        negative. If clear_if_auxiliary is True and no center remains
        differentiated, the prefixes are cleared to no_derivative().
        """
        if ncenters is not None:
            assert ncenters == len( self._shapes ), 'number of centers does not match prefixes'
        shape = self._shapes[center].shift(axis,value)
        if shape is None:
            return None
        shapes = list( self._shapes )
        shapes[center] = shape
        if clear_if_auxiliary and sum( s.order() for s in shapes ) == 0:
            return no_derivative()
        return derivative(shapes)

class integral_component(classtools.valuetools):
    """
    One Cartesian component of an integral over 1-4 centers.

    centers:    list of tensor_component objects, one per center (a, b, c, d)
    integrand:  operator_component
    prefixes:   no_derivative() (default) or derivative() with one
                tensor_component per center
    bra_size:   number of centers on the bra side, the remaining centers
                form the ket, e.g. 1 for ( a | b ) and ( a | c d ), 2 for
                ( a b | c d )
    """
    def __init__(self,centers,integrand,prefixes=None,bra_size=1):
        centers = tuple( centers )
        assert 1 <= len( centers ) <= 4, 'integrals have 1-4 centers'
        for center in centers:
            assert isinstance(center,tensor_component), 'centers must be tensor_component objects'
        assert isinstance(integrand,operator_component), 'integrand must be an operator_component'
        if prefixes is None:
            prefixes = no_derivative()
        assert isinstance(prefixes,(no_derivative,derivative)), \
                'prefixes must be no_derivative or derivative'
        if not prefixes.empty():
            assert len( prefixes.shapes() ) == len( centers ), \
                    'number of prefixes must equal number of centers'
        assert isinstance(bra_size,int) and 1 <= bra_size <= len( centers ), \
                'bra_size must be between 1 and the number of centers'
        self._centers = centers
        self._integrand = integrand
        self._prefixes = prefixes
        self._bra_size = bra_size

    def __repr__(self):
        return 'integral_component('+self.label(use_order=True)+')'

    def __str__(self):
        return self.label()

    def __getitem__(self,center):
        return self._centers[center]

    def key(self):
        return ( tuple( c.key() for c in self.bra() ), self._integrand.key(),\
                 self._prefixes.key(), tuple( c.key() for c in self.ket() ) )

    def centers(self):
        return self._centers

    def ncenters(self):
        return len( self._centers )

    def bra_size(self):
        return self._bra_size

    def bra(self):
        return self._centers[ :self._bra_size ]

    def ket(self):
        return self._centers[ self._bra_size: ]

    def integrand(self):
        return self._integrand

    def prefixes(self):
        return self._prefixes

    def order(self):
        """Auxiliary expansion order carried by the integrand."""
        return self._integrand.order()

    def base(self):
        """The same integral component without prefixes."""
        return integral_component(self._centers,self._integrand,no_derivative(),self._bra_size)

    def label(self,use_order=False):
        parts = []
        if not self._prefixes.empty():
            parts.append( self._prefixes.label() )
        if self._integrand.shape().order() > 0:
            parts.append( self._integrand.shape().label() )
        parts.extend( c.label() for c in self._centers )
        if use_order:
            parts.append( str( self.order() ) )
        return '_'.join( parts )

    def auxilary(self,center):
        """True if no further recursion is needed on center, i.e. both the
        Cartesian order and the prefix order on center are zero."""
        return self._centers[center].order() == 0 and \
                self._prefixes.shape(center).order() == 0

    def _copy(self,centers=None,integrand=None,prefixes=None):
        if centers is None:
            centers = self._centers
        if integrand is None:
            integrand = self._integrand
        if prefixes is None:
            prefixes = self._prefixes
        return integral_component(centers,integrand,prefixes,self._bra_size)

    def replace(self,name):
        """Returns the integral with the integrand renamed to name."""
        return self._copy( integrand = self._integrand.replace(name) )

    def shift(self,axis,value,center):
        tcomp = self._centers[center].shift(axis,value)
        if tcomp is None:
            return None
        centers = list( self._centers )
        centers[center] = tcomp
        return self._copy( centers = centers )

    def shift_prefix(self,axis,value,center,clear_if_auxiliary=False):
        prefixes = self._prefixes.shift(axis,value,center,len( self._centers ),clear_if_auxiliary)
        if prefixes is None:
            return None
        return self._copy( prefixes = prefixes )

    def shift_operator(self,axis,value):
        integrand = self._integrand.shift(axis,value)
        if integrand is None:
            return None
        return self._copy( integrand = integrand )

    def shift_order(self,value):
        integrand = self._integrand.shift_order(value)
        if integrand is None:
            return None
        return self._copy( integrand = integrand )

    def integral_class(self):
        if self._prefixes.empty():
            prefix_orders = None
        else:
            prefix_orders = self._prefixes.orders()
        return integral_class( [ c.order() for c in self._centers ], self._integrand.name(),\
                               self._integrand.shape().order(), prefix_orders, self._bra_size,\
                               self._integrand.order() )

class integral_class(classtools.valuetools):
    """
    Shell-level description of a set of integral components, e.g. ( P | D )
    for overlap integrals with a p shell on center a and a d shell on
    center b.

    angular_momenta:  list of shell orders, one per center
    integrand:        name of the operator
    operator_order:   order of the tensorial shape of the operator
    prefix_orders:    None, or a list of geometric derivative orders (one per
                      center)
    bra_size:         number of centers on the bra side
    order:            auxiliary expansion order of the operator
    """
    def __init__(self,angular_momenta,integrand,operator_order=0,prefix_orders=None,\
                 bra_size=1,order=0):
        angular_momenta = tuple( angular_momenta )
        assert 1 <= len( angular_momenta ) <= 4, 'integrals have 1-4 centers'
        for l in angular_momenta:
            assert isinstance(l,int) and l >= 0, 'angular momenta must be non-negative integers'
        assert isinstance(integrand,str), 'integrand must be an operator name'
        assert isinstance(operator_order,int) and operator_order >= 0,\
                'operator_order must be a non-negative integer'
        if prefix_orders is not None:
            prefix_orders = tuple( prefix_orders )
            assert len( prefix_orders ) == len( angular_momenta ),\
                    'number of prefix orders must equal number of centers'
            # An all-zero derivative is the underived integral
            if sum( prefix_orders ) == 0:
                prefix_orders = None
        assert isinstance(bra_size,int) and 1 <= bra_size <= len( angular_momenta ),\
                'bra_size must be between 1 and the number of centers'
        assert isinstance(order,int) and order >= 0, 'order must be a non-negative integer'
        self._angular_momenta = angular_momenta
        self._integrand = integrand
        self._operator_order = operator_order
        self._prefix_orders = prefix_orders
        self._bra_size = bra_size
        self._order = order

    def __repr__(self):
        return 'integral_class'+self.label()

    def __str__(self):
        return self.label()

    def key(self):
        prefix_orders = self._prefix_orders if self._prefix_orders is not None else ()
        return ( self._angular_momenta, self._integrand, self._operator_order,\
                 prefix_orders, self._bra_size, self._order )

    def angular_momenta(self):
        return self._angular_momenta

    def integrand(self):
        return self._integrand

    def operator_order(self):
        return self._operator_order

    def prefix_orders(self):
        return self._prefix_orders

    def bra_size(self):
        return self._bra_size

    def order(self):
        return self._order

    def ncenters(self):
        return len( self._angular_momenta )

    def prefix(self):
        return 'buffer'

    def label(self):
        shells = [ tensor(l).label() for l in self._angular_momenta ]
        operator = self._integrand
        if self._operator_order > 0:
            operator += str( self._operator_order )
        out = []
        if self._prefix_orders is not None:
            out.append( 'd'+''.join( str(o) for o in self._prefix_orders ) )
        out.append( '(' )
        out.append( ''.join( shells[ :self._bra_size ] ) )
        out.append( '|'+operator+'|' )
        out.append( ''.join( shells[ self._bra_size: ] ) )
        out.append( ')' )
        if self._order > 0:
            out.append( '^'+str( self._order ) )
        return ''.join( out )

    def components(self):
        """All integral components of the class, in canonical order."""
        center_shells = [ tensor(l).components() for l in self._angular_momenta ]
        operator_shells = tensor( self._operator_order ).components()
        if self._prefix_orders is None:
            prefix_list = [ no_derivative() ]
        else:
            prefix_list = [ derivative(shapes) for shapes in \
                    itertools.product( *[ tensor(o).components() for o in self._prefix_orders ] ) ]
        out = []
        for prefixes in prefix_list:
            for shape in operator_shells:
                integrand = operator_component(self._integrand,shape,self._order)
                for centers in itertools.product( *center_shells ):
                    out.append( integral_component(centers,integrand,prefixes,self._bra_size) )
        return out
