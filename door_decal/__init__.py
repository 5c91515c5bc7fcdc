"""
Door Decal Configurator.
Measurement & pricing engine plus the design placement engine behind the
DecoraPuertas vinyl storefront.
"""
