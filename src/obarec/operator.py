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
from obarec import classtools
from obarec.tensor import tensor_component

class operator_component(classtools.valuetools):
    """
    One component of a physical operator appearing in an integral,
    e.g. the overlap operator "1", the kinetic energy operator "T", the
    nuclear potential "A" or the Coulomb operator "1/|r-r'|".

    shape:   tensorial component of the operator, nonzero for multipole
             ("r"), linear momentum ("p"), electric field ("A1") and
             nuclear potential gradient ("AG") operators.
    order:   auxiliary expansion index carried by the operator, i.e. the
             Boys function order for Coulomb-type operators and the projector
             angular momentum l for the projected ECP operator "U_l".
    """
    def __init__(self,name,shape=None,order=0):
        assert isinstance(name,str), 'name must be a string'
        if shape is None:
            shape = tensor_component()
        assert isinstance(shape,tensor_component), 'shape must be a tensor_component'
        assert isinstance(order,int) and order >= 0, 'order must be a non-negative integer'
        self._name = name
        self._shape = shape
        self._order = order

    def __repr__(self):
        return 'operator_component('+repr(self._name)+','+repr(self._shape)+','+str(self._order)+')'

    def __str__(self):
        return self.label()

    def key(self):
        return ( self._name, self._shape.key(), self._order )

    def name(self):
        return self._name

    def shape(self):
        return self._shape

    def order(self):
        return self._order

    def label(self):
        if self._shape.order() > 0:
            return self._name+'_'+self._shape.label()
        return self._name

    def replace(self,name):
        """Returns the operator with the same shape and order and a new name."""
        return operator_component(name,self._shape,self._order)

    def shift(self,axis,value):
        shape = self._shape.shift(axis,value)
        if shape is None:
            return None
        return operator_component(self._name,shape,self._order)

    def shift_order(self,value):
        if self._order + value < 0:
            return None
        return operator_component(self._name,self._shape,self._order+value)
