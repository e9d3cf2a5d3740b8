"""Django project package for the dictionary import site."""
