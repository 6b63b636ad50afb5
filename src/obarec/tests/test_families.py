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
import unittest
from obarec import families
from obarec.families import *
from obarec.tensor import tensor_component
from obarec.operator import operator_component
from obarec.integral import integral_component, derivative
from obarec.errors import UnknownFamilyError
from obarec.drivers import overlap_driver, multipole_driver, electron_repulsion_driver, ERI_INTEGRAND

s = tensor_component()
px = tensor_component(1,0,0)

def component(name,shape=None,ncenters=2,prefixes=None):
    return integral_component( [ px ]+[ s ]*(ncenters-1), operator_component(name,shape), prefixes )

class TestFamilies(unittest.TestCase):
    """Tests for the operator family registry."""
    def setUp(self):
        self._registered = registered_families()

    def tearDown(self):
        # Undo registrations made by a test
        families._families[:] = self._registered

    def test_find_family(self):
        self.assertEqual( find_family( component('1') ).name(), 'overlap' )
        self.assertEqual( find_family( component('T') ).name(), 'kinetic energy' )
        self.assertEqual( find_family( component('r',px) ).name(), 'multipole' )
        self.assertEqual( find_family( component(ERI_INTEGRAND) ).name(), 'electron repulsion' )
        self.assertEqual( find_family( component(ERI_INTEGRAND,ncenters=3) ).name(),\
                'three center electron repulsion' )
        self.assertEqual( find_family( component(ERI_INTEGRAND,ncenters=4) ).name(),\
                'four center electron repulsion' )
        self.assertTrue( isinstance( find_family( component('1') ).driver(), overlap_driver ) )
        self.assertTrue( isinstance( find_family( component('r',px) ).driver(), multipole_driver ) )
        # Drivers are created once
        self.assertIs( find_family( component('1') ).driver(), find_family( component('1') ).driver() )
        # Derivative prefixes do not change the family
        prefixes = derivative( [ px, s ] )
        self.assertEqual( find_family( component('1',prefixes=prefixes) ).name(), 'overlap' )

    def test_unknown_family(self):
        self.assertRaises( UnknownFamilyError, find_family, component('Q') )
        # Shaped operators need a nonzero shape and vice versa
        self.assertRaises( UnknownFamilyError, find_family, component('r') )
        self.assertRaises( UnknownFamilyError, find_family, component('1',px) )
        self.assertRaises( UnknownFamilyError, find_family, component('1',ncenters=3) )
        self.assertFalse( is_known_integrand( component('Q') ) )
        self.assertTrue( is_known_integrand( component('U_L') ) )
        try:
            find_family( component('Q') )
        except UnknownFamilyError as e:
            self.assertEqual( e.value(), component('Q') )
            self.assertIn( 'Q', e.message() )

    def test_properties(self):
        self.assertFalse( needs_boys_function( component('1') ) )
        self.assertFalse( needs_boys_function( component('T') ) )
        self.assertTrue( needs_boys_function( component('A') ) )
        self.assertTrue( needs_boys_function( component('AG',px) ) )
        self.assertTrue( needs_boys_function( component('A1',px) ) )
        self.assertTrue( needs_boys_function( component(ERI_INTEGRAND,ncenters=4) ) )
        self.assertFalse( needs_boys_function( component('U_l') ) )
        self.assertEqual( len( registered_families() ), 17 )

    def test_needs_distances(self):
        ss = lambda name, shape=None: integral_component( [ s, s ], operator_component(name,shape) )
        self.assertFalse( needs_distances( ss('1') ) )
        self.assertFalse( needs_distances( ss('A') ) )
        self.assertFalse( needs_distances( ss(ERI_INTEGRAND) ) )
        self.assertFalse( needs_distances( ss('G(r)') ) )
        self.assertTrue( needs_distances( component('1') ) )
        self.assertTrue( needs_distances( component('U_l') ) )
        # Operators bringing in distances of their own
        self.assertTrue( needs_distances( ss('p',px) ) )
        self.assertTrue( needs_distances( ss('GR2(r)') ) )
        self.assertTrue( needs_distances( ss('GX(r)',px) ) )
        self.assertFalse( needs_distances( ss('r',px) ) )
        # Derivatives raise the angular momentum of s functions
        prefixes = derivative( [ px, s ] )
        self.assertTrue( needs_distances( integral_component( [ s, s ], operator_component('1'), prefixes ) ) )

    def test_gaussian_families(self):
        self.assertEqual( find_family( component('G(r)') ).name(), 'three center overlap' )
        self.assertEqual( find_family( component('G(r)',ncenters=3) ).name(),\
                'three center overlap, shell on the Gaussian' )
        self.assertEqual( find_family( component('GX(r)',px) ).name(), 'three center overlap gradient' )
        self.assertEqual( find_family( component('GR2(r)') ).name(), 'three center r2 overlap' )
        self.assertEqual( find_family( component('GR.R2(r)',px) ).name(), 'three center r.r2 overlap' )
        # Only operator shapes of order 1 are supported
        dxx = tensor_component(2,0,0)
        self.assertRaises( UnknownFamilyError, find_family, component('GX(r)',dxx) )
        self.assertRaises( UnknownFamilyError, find_family, component('GR2(r)',px) )
        self.assertFalse( needs_boys_function( component('G(r)') ) )

    def test_register_family(self):
        class quadrupole_driver(multipole_driver):
            integrand_name = 'Q'
        register_family( operator_family('quadrupole','Q',quadrupole_driver,shaped=True) )
        family = find_family( component('Q',px) )
        self.assertEqual( family.name(), 'quadrupole' )
        self.assertTrue( family.shaped() )
        self.assertEqual( family.integrand(), 'Q' )
        self.assertEqual( family.ncenters(), 2 )
        self.assertTrue( isinstance( family.driver(), quadrupole_driver ) )
        # Later registrations take precedence
        register_family( operator_family('overlap 2','1',electron_repulsion_driver) )
        self.assertEqual( find_family( component('1') ).name(), 'overlap 2' )
        self.assertRaises( AssertionError, register_family, 'overlap' )
        self.assertRaises( AssertionError, operator_family, 'five center','1',overlap_driver,ncenters=5 )
