"""
Template Selector for Traycer Lite

Hand-written TypeScript templates, one per artifact type. Function prompts
are further matched against a few well-known algorithms; component, api and
script templates ignore the prompt and are parameterized only by name.
"""

import re
from string import Template

from .models import ArtifactType

PRIME_TEMPLATE = Template("""\
export function ${name}(n: number): boolean {
  if (!Number.isInteger(n) || n < 2) return false;
  for (let i = 2; i * i <= n; i++) {
    if (n % i === 0) return false;
  }
  return true;
}
""")

FIBONACCI_TEMPLATE = Template("""\
export function ${name}(n: number): number {
  if (!Number.isInteger(n) || n < 0) throw new Error('n must be a non-negative integer');
  if (n <= 1) return n;
  let a = 0, b = 1;
  for (let i = 2; i <= n; i++) {
    const next = a + b;
    a = b;
    b = next;
  }
  return b;
}
""")

FACTORIAL_TEMPLATE = Template("""\
export function ${name}(n: number): number {
  if (!Number.isInteger(n) || n < 0) throw new Error('n must be a non-negative integer');
  let acc = 1;
  for (let i = 2; i <= n; i++) acc *= i;
  return acc;
}
""")

REVERSE_STRING_TEMPLATE = Template("""\
export function ${name}(s: string): string {
  return Array.from(s).reverse().join('');
}
""")

DEBOUNCE_TEMPLATE = Template("""\
export function ${name}<T extends (...args: any[]) => any>(fn: T, wait: number) {
  let t: NodeJS.Timeout | null = null;
  return (...args: Parameters<T>) => {
    if (t) clearTimeout(t);
    t = setTimeout(() => fn(...args), wait);
  };
}
""")

STUB_TEMPLATE = Template("""\
export function ${name}(/* params */): any {
  throw new Error('Not implemented');
}
""")

COMPONENT_TEMPLATE = Template("""\
import React, { useState } from 'react';

export function ${name}() {
  const [value, setValue] = useState('');
  return (
    <div style={{ fontFamily: 'system-ui', padding: 12 }}>
      <label>
        <span>Value:</span>
        <input value={value} onChange={e => setValue(e.target.value)} />
      </label>
      <pre>Current: {value}</pre>
    </div>
  );
}
""")

API_TEMPLATE = Template("""\
import http from 'node:http';

const server = http.createServer((req, res) => {
  if (req.method === 'GET' && req.url === '/health') {
    res.writeHead(200, { 'Content-Type': 'application/json' });
    res.end(JSON.stringify({ ok: true }));
    return;
  }
  res.writeHead(404);
  res.end();
});

server.listen(3000, () => {
  console.log('API listening on http://localhost:3000');
});
""")

SCRIPT_TEMPLATE = Template("""\
#!/usr/bin/env node
const args = process.argv.slice(2);
if (args.length === 0) {
  console.log('Usage: my-cli <text>');
  process.exit(1);
}
console.log('You said:', args.join(' '));
""")


def _is_reverse_string(prompt: str) -> bool:
    return "reverse" in prompt and "string" in prompt


# Ordered predicates over the lowercased prompt; first match wins.
FUNCTION_RULES = [
    (lambda p: re.search(r"prime", p) is not None, PRIME_TEMPLATE),
    (lambda p: re.search(r"fibonacci|fib", p) is not None, FIBONACCI_TEMPLATE),
    (lambda p: re.search(r"factorial", p) is not None, FACTORIAL_TEMPLATE),
    (_is_reverse_string, REVERSE_STRING_TEMPLATE),
    (lambda p: re.search(r"debounce", p) is not None, DEBOUNCE_TEMPLATE),
]


def function_template(name: str, prompt: str) -> str:
    """Pick a function body by matching well-known algorithms in the prompt."""
    lowered = prompt.lower()
    for predicate, template in FUNCTION_RULES:
        if predicate(lowered):
            return template.substitute(name=name)
    return STUB_TEMPLATE.substitute(name=name)


def component_template(name: str, prompt: str) -> str:
    return COMPONENT_TEMPLATE.substitute(name=name)


def api_template(name: str, prompt: str) -> str:
    return API_TEMPLATE.substitute(name=name)


def script_template(name: str, prompt: str) -> str:
    return SCRIPT_TEMPLATE.substitute(name=name)


TEMPLATE_BUILDERS = {
    ArtifactType.FUNCTION: function_template,
    ArtifactType.COMPONENT: component_template,
    ArtifactType.API: api_template,
    ArtifactType.SCRIPT: script_template,
}


def select_template(artifact_type: ArtifactType, name: str, prompt: str) -> str:
    """
    Return the code text for an artifact.

    Args:
        artifact_type: Classified artifact type
        name: Inferred identifier
        prompt: Original prompt (only consulted for function bodies)

    Returns:
        TypeScript source ending with a newline
    """
    return TEMPLATE_BUILDERS[artifact_type](name, prompt)
