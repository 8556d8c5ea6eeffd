"""
Restaurant inspection analyser.
Loads inspection records from a delimited text file and answers summary queries.
"""
