"""
Function composition, pipes, and partial application over an element-wise mapper.
"""
