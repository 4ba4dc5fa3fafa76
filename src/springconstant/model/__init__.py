"""
The MODEL layer contains the analytic spring model and its sweeps.
It has NO knowledge of plotting or the command line.
"""
