# simulations/__init__.py
"""
Monte Carlo simulations of Can't Stop lane configurations.

Run the full catalog via:
    python -m simulations --trials 100000 [--lanes 7 --lanes 2,3,4] [--plot out.png]
"""
