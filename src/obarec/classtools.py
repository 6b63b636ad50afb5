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
# Generic classes and methods for developing, debugging and comparing classes

class classtools:
    """
    Provides some generic methods which can help with debugging
    classes and instances of classes.
    This class can be inherited by any other class and provide useful
    methods to it.
    """
    def debug_str(self,list_out=False):
        """
        Provides a nicely formatted string (with linebreaks) containing
        information about the class, instance of the class
        and attributes of that instance to the standard output.
        If list_out = True, then return a list of lines.
        """
        assert isinstance(list_out,bool), 'list_out must be True or False'
        superclass_list = []
        def list_superclasses(c):
            nonlocal superclass_list
            if len( c.__bases__ ) > 0:
                superclass_list.append( c.__bases__ )
                for b in c.__bases__:
                    list_superclasses( b )
        out = []
        out.append( 'Class: '+ self.__class__.__name__ )
        out.append( 'Object: '+ self.__repr__() )
        if len( self.__dict__ ) > 0:
            out.append( 'Object attributes:' )
            for key, value in self.__dict__.items():
                out.append( str(key)+' => '+str(value) )
        out.append( 'Superclasses:' )
        list_superclasses(self.__class__)
        for c in reversed( superclass_list ):
            out.append( str( c ) )
        if list_out == False:
            return '\n'.join( out )
        else:
            return out

class valuetools(classtools):
    """
    Value semantics for the immutable objects of the recursion algebra
    (tensor components, factors, operators, integrals, terms).

    Subclasses provide a key() method returning a tuple which both
    identifies the object and defines its ordering. Equality, hashing
    and the rich comparison operators are derived from key(), so that
    instances can be used as dictionary keys, collected in sets and
    sorted into canonical order.

    Comparisons are only defined between instances of the same class.
    """
    def key(self):
        raise NotImplementedError('key() must be provided by '+self.__class__.__name__)

    def __eq__(self,other):
        if not isinstance( other, self.__class__ ):
            return NotImplemented
        return self.key() == other.key()

    def __ne__(self,other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self,other):
        assert isinstance( other, self.__class__ ),\
                'cannot order '+self.__class__.__name__+' against '+other.__class__.__name__
        return self.key() < other.key()

    def __le__(self,other):
        return self == other or self < other

    def __gt__(self,other):
        assert isinstance( other, self.__class__ ),\
                'cannot order '+self.__class__.__name__+' against '+other.__class__.__name__
        return other.key() < self.key()

    def __ge__(self,other):
        return self == other or self > other

    def __hash__(self):
        return hash( ( self.__class__.__name__, self.key() ) )
