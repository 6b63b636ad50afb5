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
from obarec.namer import *
from obarec.integral import integral_class

class TestNamer(unittest.TestCase):
    """Tests the namer class which creates names for the buffers
    written out by the emitters."""
    def setUp(self):
        pass

    def tearDown(self):
        pass

    def test_namer(self):
        """Test the namer class in isolation using mock objects."""
        class buffer_mock:
            """Mock object that can be processed by namer. Distinct
            instances are never equal."""
            def __init__(self,prefix):
                self._prefix = prefix
            def prefix(self):
                return self._prefix
        n = namer()
        self.assertEqual( 'i_1', n( buffer_mock('i') ) )
        self.assertEqual( 'i_2', n( buffer_mock('i') ) )
        self.assertEqual( 'dp_1', n( buffer_mock('dp') ) )
        self.assertEqual( 'dp_2', n( buffer_mock('dp') ) )
        self.assertEqual( n.names(), 4 )
        n = namer(separator='X',default_suffix='000')
        for count in range(1,100):
            self.assertEqual( 'iX'+str(count)+'000', n( buffer_mock('i') ) )
            self.assertEqual( 'dpX'+str(count)+'000', n( buffer_mock('dp') ) )
        # Test reset_counters()
        n.reset_counters()
        self.assertEqual( n.names(), 0 )
        for count in range(1,10):
            self.assertEqual( 'iX'+str(count)+'000', n( buffer_mock('i') ) )

    def test_namer_integral_classes(self):
        n = namer()
        ps = integral_class( [ 1, 0 ], '1' )
        ss = integral_class( [ 0, 0 ], '1' )
        self.assertEqual( n( ps ), 'buffer_1' )
        self.assertEqual( n( ss ), 'buffer_2' )
        # Equal classes share a name
        self.assertEqual( n( integral_class( [ 1, 0 ], '1' ) ), 'buffer_1' )
        self.assertEqual( n( integral_class( [ 0, 0 ], '1', order = 1 ) ), 'buffer_3' )
        self.assertEqual( n.names(), 3 )
        self.assertRaises( AttributeError, n, 42 )
