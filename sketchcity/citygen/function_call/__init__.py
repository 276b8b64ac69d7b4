"""High-level interface for generating, rendering and exporting a city sketch."""
from sketchcity.citygen.function_call.city_function_call import \
    CityFunctionCall

__all__ = ['CityFunctionCall']
