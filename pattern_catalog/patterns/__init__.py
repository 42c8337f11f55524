"""Pattern implementations.

- creational/: Singleton, Factory, Abstract Factory, Builder, Prototype
- structural/: Adapter, Bridge
"""
