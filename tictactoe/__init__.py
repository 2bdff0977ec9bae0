"""
Tic-tac-toe board engine - grid model, win/draw evaluation, and turn driver.
"""
