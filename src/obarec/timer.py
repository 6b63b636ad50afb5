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
Timers for "with" blocks.

timer           -- records the time taken by a block
context_timer   -- also reports the block name and timing to stdout
"""
import time

class timer:
    """
    Provides __enter__ and __exit__ methods for timing of events inside a "with" block.
    """
    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.end_time   = time.perf_counter()
        self.time_taken = self.end_time - self.start_time
        return None

class context_timer(timer):
    """
    Times a "with" block and reports it to stdout as

        <block_name>               completed in x.xxx s.

    with the timing right-justified to message_width. The output is only
    aligned if nothing else is printed inside the block.
    """
    def __init__(self,block_name = "Block",message_width = 80,silent = False):
        """
        block_name:     name of block, output at start of operation
        message_width:  desired width of output (longer messages are split
                        over 2 lines)
        silent:         if True, nothing is printed; time_taken is still set
        """
        self.block_name = block_name
        self.message_width = message_width
        self.silent = silent

    def __enter__(self):
        timer.__enter__(self)
        if not self.silent:
            print( self.block_name,end="",flush=True )
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        timer.__exit__(self, exc_type, exc_value, traceback )
        if not self.silent:
            close_str = "completed in {:.3f} s.".format(self.time_taken)
            if len(self.block_name+close_str) > self.message_width:
                rjust_width = self.message_width
                print( '' )
            else:
                rjust_width = self.message_width-len(self.block_name)
            print( close_str.rjust( rjust_width ) )
        return None
