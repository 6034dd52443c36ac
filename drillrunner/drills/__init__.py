"""Worked solutions to the exercise topics, as plain Python."""