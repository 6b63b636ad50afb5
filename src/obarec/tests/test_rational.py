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
from fractions import Fraction
from obarec.rational import *

class TestRational(unittest.TestCase):
    """Tests for rational.py functions."""
    def setUp(self):
        pass

    def tearDown(self):
        pass

    def test_rational(self):
        self.assertEqual( rational(2,4), Fraction(1,2) )
        self.assertEqual( rational(3), Fraction(3) )
        self.assertEqual( rational(-1,2) + rational(1,2), 0 )
        self.assertRaises( AssertionError, rational, 1, 0 )
        self.assertRaises( AssertionError, rational, 0.5 )

    def test_rational_label(self):
        self.assertEqual( rational_label( rational(3) ), '3.0' )
        self.assertEqual( rational_label( rational(-1,3) ), '-1.0 / 3.0' )
        self.assertEqual( rational_label( 2 ), '2.0' )

    def test_rational_literal(self):
        self.assertEqual( rational_literal( rational(1,2) ), '0.5' )
        self.assertEqual( rational_literal( rational(-3,8) ), '-0.375' )
        self.assertEqual( rational_literal( rational(-5,2) ), '-2.5' )
        self.assertEqual( rational_literal( rational(1,20) ), '0.05' )
        self.assertEqual( rational_literal( rational(5) ), '5.0' )
        self.assertEqual( rational_literal( rational(0) ), '0.0' )
        # Non-terminating decimal expansion
        self.assertEqual( rational_literal( rational(1,3) ), '1.0 / 3.0' )
