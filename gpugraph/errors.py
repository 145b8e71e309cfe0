#-*- coding: utf-8 -*-
"""
exceptions raised by gpugraph.

viewport invariant violations are not part of this list:
the viewport rejects such mutations in place.
"""

class GraphError(Exception):
    pass

class EvaluationError(GraphError):
    """ the function expression cannot be compiled """
    def __init__(self, expression, msg):
        super().__init__('cannot evaluate "{}": {}'.format(expression, msg))
        self.expression = expression

class GlError(GraphError):
    pass

class ContextError(GlError):
    pass

class ProgramError(GlError):
    pass

class ShaderError(GlError):
    def __init__(self, shader_name, msg):
        super().__init__('Shader({}): {}'.format(shader_name, msg))
        self.shader_name = shader_name
