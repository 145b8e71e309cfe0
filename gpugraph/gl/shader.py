#-*- coding: utf-8 -*-
"""
shader library

    try:
        program = Program()
        program.shaders.append(Shader(GL_VERTEX_SHADER, load_resource('glsl/line.vert.glsl')))
        program.shaders.append(Shader(GL_FRAGMENT_SHADER, load_resource('glsl/line.frag.glsl')))
        program.link()
    except GlError as e:
        logger.error('oh no, too bad.. %s', e)

programs find out which uniforms are present in the given
shaders by parsing the sources. A uniform can be set at any
time, if the program is not in use the value is kept and
flushed to the gpu on the next use().
"""
import logging
import re
from copy import deepcopy
from string import Template

import numpy as np
from OpenGL.GL import (
    GL_VERTEX_SHADER, GL_FRAGMENT_SHADER, GL_GEOMETRY_SHADER, GL_FALSE,
    GL_COMPILE_STATUS, GL_LINK_STATUS,
    glCreateShader, glShaderSource, glCompileShader, glGetShaderiv, glGetShaderInfoLog,
    glDeleteShader, glCreateProgram, glAttachShader, glLinkProgram, glGetProgramiv,
    glGetProgramInfoLog, glDeleteProgram, glUseProgram, glGetUniformLocation,
    glUniform4f, glUniformMatrix4fv)

from gpugraph.config import GL_VERSION, load_resource
from gpugraph.errors import ShaderError, ProgramError

logger = logging.getLogger(__name__)

__all__ = ['Shader', 'Program', 'create_program']

STRING_SHADER_NAMES = {
    GL_VERTEX_SHADER  : 'GL_VERTEX_SHADER',
    GL_GEOMETRY_SHADER: 'GL_GEOMETRY_SHADER',
    GL_FRAGMENT_SHADER: 'GL_FRAGMENT_SHADER',
}

# example: uniform float dorp;
#          uniform vec4 u_color;
_uniform_rgx = re.compile(r'uniform\s+(\w+)\s+(\w+)\s*(?:\[\d+\])?;', flags=re.MULTILINE)


def _decode(log):
    if isinstance(log, bytes):
        return log.decode('utf-8', errors='replace')
    return log or ''


class Shader():
    """
    shader representation
    """
    def __init__(self, type, source, substitutions=None):
        """
        :param type: GL_VERTEX_SHADER, GL_FRAGMENT_SHADER, ...
        :param source: glsl source. ${VERSION} is substituted
                       by the gl version, e.g. 410.
        """
        self.substitutions = {
            'VERSION': '{}{}0'.format(*GL_VERSION)
        }
        self.substitutions.update(substitutions or {})

        self.type = type
        self.source = source
        self.gl_shader_id = None

        # name -> glsl type
        self.uniforms = {}
        self.parse()

    @property
    def name(self):
        return STRING_SHADER_NAMES.get(self.type, str(self.type))

    def parse(self):
        self.uniforms = {name: dtype for dtype, name in _uniform_rgx.findall(self.source)}

    def render(self):
        """ returns the source with substitutions applied """
        return Template(self.source).safe_substitute(self.substitutions)

    def compile(self):
        """
        compiles shader and returns gl id
        """
        if self.gl_shader_id is None:
            self.gl_shader_id = glCreateShader(self.type)
            if self.gl_shader_id < 1:
                self.gl_shader_id = None
                raise ShaderError(self.name, 'glCreateShader returns an invalid id.')

            glShaderSource(self.gl_shader_id, self.render())
            glCompileShader(self.gl_shader_id)

            error_log = _decode(glGetShaderInfoLog(self.gl_shader_id))
            if glGetShaderiv(self.gl_shader_id, GL_COMPILE_STATUS) == GL_FALSE:
                self.delete()
                raise ShaderError(self.name, error_log)
            if error_log.strip():
                logger.warning('%s: %s', self.name, error_log.strip())

        return self.gl_shader_id

    def delete(self):
        """
        deletes gl shader if exists
        """
        if self.gl_shader_id is not None:
            glDeleteShader(self.gl_shader_id)
            self.gl_shader_id = None


class Program():
    """
    opengl render program representation
    """
    __LAST_USE_GL_ID = None

    def __init__(self):
        self.shaders = []
        self.gl_program_id = None
        # name -> (location, glsl type)
        self.uniforms = {}
        self._uniform_changes = {}

    def link(self):
        """
        compiles and links all shaders together
        """
        self.gl_program_id = glCreateProgram()
        if self.gl_program_id < 1:
            self.gl_program_id = None
            raise ProgramError('glCreateProgram returns an invalid id')

        for shader in self.shaders:
            shader.compile()
            glAttachShader(self.gl_program_id, shader.gl_shader_id)
        glLinkProgram(self.gl_program_id)

        if glGetProgramiv(self.gl_program_id, GL_LINK_STATUS) == GL_FALSE:
            error_log = _decode(glGetProgramInfoLog(self.gl_program_id))
            self.delete()
            raise ProgramError(error_log)

        # shaders are not needed anymore once linked
        for shader in self.shaders:
            shader.delete()

        self._configure_uniforms()
        logger.debug('linked program %s', self.gl_program_id)
        return self.gl_program_id

    def _configure_uniforms(self):
        self.uniforms = {}
        for shader in self.shaders:
            for name, dtype in shader.uniforms.items():
                if name in self.uniforms and self.uniforms[name][1] != dtype:
                    raise ProgramError('uniform "{}" appears twice with different types: {}, {}'.format(
                        name, self.uniforms[name][1], dtype))

                location = glGetUniformLocation(self.gl_program_id, name)
                if location == -1:
                    logger.warning(('could not receive uniform location "%s". '
                                    'Maybe it was never used within main() function?'), name)
                self.uniforms[name] = (location, dtype)

    def use(self):
        """
        tells opengl state to use this program
        """
        if Program.__LAST_USE_GL_ID is not None and Program.__LAST_USE_GL_ID != self.gl_program_id:
            raise ProgramError('cannot use program {} since program {} is still in use'.format(
                self.gl_program_id, Program.__LAST_USE_GL_ID))

        if self.gl_program_id != Program.__LAST_USE_GL_ID:
            glUseProgram(self.gl_program_id)
            Program.__LAST_USE_GL_ID = self.gl_program_id
            self.flush_uniforms()

    def unuse(self):
        """
        tells opengl state to unuse this program
        """
        if self.gl_program_id != Program.__LAST_USE_GL_ID:
            raise ProgramError('cannot unuse program since its not used.')

        glUseProgram(0)
        Program.__LAST_USE_GL_ID = None

    def delete(self):
        """
        deletes gl program if exists
        """
        if self.gl_program_id is not None:
            if Program.__LAST_USE_GL_ID == self.gl_program_id:
                self.unuse()
            glDeleteProgram(self.gl_program_id)
            self.gl_program_id = None

    def uniform(self, name, value):
        """
        set uniform **name** to **value**. if the program is not
        in use the change is sent on the next use().
        """
        if name not in self.uniforms:
            raise ProgramError('unknown uniform "{}"'.format(name))

        if self.gl_program_id is not None and self.gl_program_id == Program.__LAST_USE_GL_ID:
            self._uniform(name, value)
        else:
            self._uniform_changes[name] = deepcopy(value)

    def flush_uniforms(self):
        for name, value in self._uniform_changes.items():
            self._uniform(name, value)
        self._uniform_changes = {}

    def _uniform(self, name, value):
        location, dtype = self.uniforms[name]
        if location == -1:
            return

        if dtype == 'vec4':
            glUniform4f(location, *np.array(value, dtype=np.float32))
        elif dtype == 'mat4':
            glUniformMatrix4fv(location, 1, GL_FALSE, np.array(value, dtype=np.float32))
        else:
            raise NotImplementedError('dtype "{}" not implemented by shader library.'.format(dtype))


def create_program(vertex_file, fragment_file):
    """ creates and links a program from packaged glsl files """
    program = Program()
    program.shaders.append(Shader(GL_VERTEX_SHADER, load_resource(vertex_file)))
    program.shaders.append(Shader(GL_FRAGMENT_SHADER, load_resource(fragment_file)))
    program.link()
    return program
