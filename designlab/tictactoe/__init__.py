"""Tic-tac-toe on an N by N board between two players."""