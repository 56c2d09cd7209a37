"""Sorting algorithms that take an iterable and return a new list."""