"""Entry point launcher - runs wurstwrap.cli as a module"""
import runpy

if __name__ == "__main__":
    # Run wurstwrap.cli as a module - this allows proper package imports without path hacks
    runpy.run_module("wurstwrap.cli", run_name="__main__")
