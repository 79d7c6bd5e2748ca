"""
neofont.constants - package metadata

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.1.0'
