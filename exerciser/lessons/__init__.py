"""Worked solutions for many of the exercise topics."""