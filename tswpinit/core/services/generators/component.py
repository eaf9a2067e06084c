"""
src/index.tsx generator — the entry component.

``plain`` renders a bare div; ``emotion`` renders a styled component
and needs the emotion packages from the preset.
"""

from __future__ import annotations

from tswpinit.core.models.template import WriteRequest
from tswpinit.core.services.generators import GeneratorContext

_PLAIN = """
    import * as React from 'react';
    import { render } from 'react-dom';

    render(
      <div>Hello, World!</div>,
      document.getElementById('app')
    );
"""

_EMOTION = """
    import * as React from 'react';
    import { render } from 'react-dom';
    import styled from 'react-emotion';

    const Message = styled.div`
      font-size: 24px;
      font-weight: bold;
      font-family: sans-serif;
      color: maroon;
      text-align: center;
      text-decoration: underline;
    `;

    render(
      <Message>Hello, World!</Message>,
      document.getElementById('app')
    );
"""

COMPONENTS = {
    "plain": _PLAIN,
    "emotion": _EMOTION,
}


def generate(ctx: GeneratorContext) -> list[WriteRequest]:
    return [ctx.source("src/index.tsx", COMPONENTS[ctx.preset.component])]
