"""Demo drivers exercising both domains"""

from .bank_demo import run_bank_demo
from .restaurant_demo import run_restaurant_demo

__all__ = ['run_bank_demo', 'run_restaurant_demo']
