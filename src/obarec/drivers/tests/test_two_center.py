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
from obarec.tensor import tensor_component
from obarec.operator import operator_component
from obarec.integral import integral_component, integral_class, derivative
from obarec.factor import factor
from obarec.rational import rational
from obarec.term import recursion_term
from obarec.distribution import recursion_distribution
from obarec.errors import RecursionConsistencyError
from obarec.drivers import *

s = tensor_component()
px = tensor_component(1,0,0)
py = tensor_component(0,1,0)
dxx = tensor_component(2,0,0)
dxy = tensor_component(1,1,0)

def term(a,b,name='1',shape=None,order=0):
    return recursion_term( integral_component( [ a, b ], operator_component(name,shape,order) ) )

class TestTwoCenterDrivers(unittest.TestCase):
    """Single recursion steps of the two-center drivers."""
    def setUp(self):
        pass

    def tearDown(self):
        pass

    def test_overlap(self):
        d = overlap_driver()
        dist = d.bra_vrr( term(px,px), 'x' )
        self.assertEqual( dist.terms(), 2 )
        self.assertEqual( dist[0], term(s,px).add( factor('PA','rpa',px) ) )
        self.assertEqual( dist[1].integral(), term(s,s).integral() )
        self.assertEqual( dist[1].prefactor(), rational(1,2) )
        self.assertEqual( dist[1].label(), '1.0 / 2.0 * fe * [0_0_0]' )
        self.assertIsNone( d.bra_vrr( term(px,px), 'y' ) )
        self.assertEqual( d.ket_vrr( term(s,dxx), 'x' ).terms(), 2 )
        # Terms of other families are not rewritten
        self.assertIsNone( d.bra_vrr( term(px,s,'T'), 'x' ) )

    def test_apply_best(self):
        d = overlap_driver()
        # Both axes give a single term, the earlier axis wins
        dist = d.apply_best( term(dxy,s), d.bra_vrr )
        self.assertEqual( dist.terms(), 1 )
        self.assertEqual( dist[0], term(py,s).add( factor('PA','rpa',px) ) )
        self.assertRaises( RecursionConsistencyError, d.apply_best, term(px,s),\
                lambda t, axis: None )
        self.assertRaises( RecursionConsistencyError, d.apply_best, term(px,s,'T'), d.bra_vrr )

    def test_apply_recursion(self):
        d = overlap_driver()
        dist = d.apply_recursion( recursion_distribution( term(s,s) ) )
        self.assertTrue( dist.empty() )
        dist = d.apply_recursion( recursion_distribution( term(px,px) ) )
        dist.simplify()
        for t in dist:
            self.assertEqual( t.integral(), term(s,s).integral() )
        # rpa_x rpb_x + 1/(2 eta)
        self.assertEqual( dist.terms(), 2 )
        group = d.create_recursion( integral_class( [ 1, 1 ], '1' ).components() )
        self.assertEqual( group.expansions(), 9 )
        # Off-diagonal components have a single product of distances
        self.assertEqual( group[1].terms(), 1 )

    def test_apply_step_merges(self):
        d = overlap_driver()
        # ( dxx | dxx ) reaches ( s | s ) through many paths
        dist = d.apply_step( recursion_distribution( term(dxx,dxx) ), 0, d.bra_vrr )
        signatures = [ t.signature() for t in dist ]
        self.assertEqual( len( signatures ), len( set( signatures ) ) )
        for t in dist:
            self.assertEqual( t[0].order(), 0 )
        # 1/2 fe ( s | dxx ), PA_x^2 ( s | dxx ), 2 PA_x fe ( s | px ) and 1/2 fe^2 ( s | s )
        self.assertEqual( dist.terms(), 4 )
        self.assertEqual( [ t.prefactor() for t in dist ], [ rational(1,2), 1, 2, rational(1,2) ] )
        self.assertEqual( dist[2].integral(), term(s,px).integral() )
        rewrites = []
        def counting_bra_vrr(t,axis):
            rewrites.append( ( t.integral(), axis ) )
            return d.bra_vrr(t,axis)
        d.apply_step( recursion_distribution( term(tensor_component(4,0,0),s) ), 0, counting_bra_vrr )
        # One rewrite per distinct integral and axis
        self.assertEqual( len( rewrites ), len( set( rewrites ) ) )
        self.assertEqual( len( rewrites ), 12 )

    def test_kinetic(self):
        d = kinetic_energy_driver()
        dist = d.bra_vrr( term(px,s,'T'), 'x' )
        self.assertEqual( dist.terms(), 2 )
        self.assertEqual( dist[0], term(px,s).add( factor('zeta','fz'), 2 ) )
        self.assertEqual( d.ket_vrr( term(s,dxx,'T'), 'x' ).terms(), 4 )
        dist = d.apply_recursion( recursion_distribution( term(px,s,'T') ) )
        for t in dist:
            self.assertTrue( d.is_base_case(t) )
            self.assertIn( t.integrand().name(), [ 'T', '1' ] )

    def test_nuclear_potential(self):
        d = nuclear_potential_driver()
        dist = d.bra_vrr( term(px,px,'A'), 'x' )
        self.assertEqual( dist.terms(), 4 )
        self.assertEqual( dist[1], term(s,px,'A',None,1).add( factor('PC','rpc',px), -1 ) )
        self.assertEqual( dist[3].order(), 1 )
        self.assertEqual( dist[3].prefactor(), rational(-1,2) )

    def test_nuclear_potential_geom(self):
        d = nuclear_potential_geom_driver()
        dist = d.ket_vrr( term(s,px,'AG',px), 'x' )
        self.assertEqual( dist.terms(), 3 )
        self.assertEqual( dist[2], term(s,s,'A',None,1) )
        self.assertIsNone( d.ket_vrr( term(s,px,'A'), 'x' ) )

    def test_multipole(self):
        d = multipole_driver()
        dist = d.bra_vrr( term(px,s,'r',px), 'x' )
        self.assertEqual( dist.terms(), 2 )
        self.assertEqual( dist[1].integrand(), operator_component('1') )
        dist = d.apply_recursion( recursion_distribution( term(px,s,'r',px) ) )
        dist.simplify()
        # The operator ( s | r_x | s ) remains as a base case
        self.assertIn( term(s,s,'r',px).integral(), dist.unique_integrals() )

    def test_linear_momentum(self):
        d = linear_momentum_driver()
        dist = d.op_vrr( term(s,s,'p',px), 'x' )
        self.assertEqual( dist.terms(), 1 )
        self.assertIsNone( d.op_vrr( term(s,s,'p',px), 'y' ) )
        dist = d.apply_recursion( recursion_distribution( term(s,s,'p',px) ) )
        self.assertEqual( dist.terms(), 1 )
        self.assertEqual( dist[0].prefactor(), 2 )
        self.assertEqual( dist[0].integral(), term(s,s).integral() )
        self.assertEqual( sorted( f.label() for f in dist[0].factors() ), [ 'fz', 'rpb_x' ] )
        dist = d.op_vrr( term(s,px,'p',px), 'x' )
        self.assertEqual( dist.terms(), 2 )
        self.assertEqual( dist[1], term(s,s).scale(-1) )
        # The lowered term is weighted by the Cartesian index b_i itself
        dist = d.op_vrr( term(s,dxx,'p',px), 'x' )
        self.assertEqual( dist[1], term(s,px).scale(-2) )

    def test_electric_field(self):
        d = electric_field_driver()
        dist = d.bra_vrr( term(px,s,'A1',px), 'x' )
        self.assertEqual( dist.terms(), 3 )
        self.assertEqual( dist[2], term(s,s,'A',None,1) )

    def test_electron_repulsion(self):
        d = electron_repulsion_driver()
        self.assertEqual( d.bra_vrr( term(px,s,ERI_INTEGRAND), 'x' ).terms(), 1 )
        dist = d.bra_vrr( term(dxx,s,ERI_INTEGRAND), 'x' )
        self.assertEqual( dist.terms(), 3 )
        self.assertEqual( dist[2].order(), 1 )
        self.assertEqual( dist[2].prefactor(), -1 )

    def test_center_derivative(self):
        d = center_derivative_driver()
        prefixes = derivative( [ px, s ] )
        t = recursion_term( integral_component( [ s, s ], operator_component('1'), prefixes ) )
        self.assertTrue( d.is_family(t) )
        dist = d.apply_recursion( recursion_distribution(t) )
        self.assertEqual( dist.terms(), 1 )
        self.assertEqual( dist[0].integral(), term(px,s).integral() )
        self.assertEqual( dist[0].prefactor(), 2 )
        dist = overlap_driver().apply_recursion( dist )
        self.assertEqual( dist.terms(), 1 )
        self.assertEqual( sorted( f.label() for f in dist[0].factors() ), [ 'a_exp', 'rpa_x' ] )
        # Lowering the derivative on ( p_x | s ) also lowers the Gaussian
        t = recursion_term( integral_component( [ px, s ], operator_component('1'), prefixes ) )
        dist = d.center_vrr( t, 'x', 0 )
        self.assertEqual( dist.terms(), 2 )
        self.assertEqual( dist[1], term(s,s).scale(-1) )
        self.assertIsNone( d.center_vrr( t, 'x', 1 ) )
