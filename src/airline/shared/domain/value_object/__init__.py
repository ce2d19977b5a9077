from .currency import Currency as Currency
from .money import Money as Money
