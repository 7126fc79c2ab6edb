"""Jinja2 source for every fragment of generated TypeScript/CSS text.

Fragments are keyed ``<kind>/<file>/<part>``.  A generated file is the
concatenation of the fragments its composer selects for a given
FileSelection; no fragment contains conditional logic of its own.

Every fragment is rendered with ``name`` (the PascalName) in scope.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Component
# ---------------------------------------------------------------------------

COMPONENT_FRAGMENTS: dict[str, str] = {
    "component/index/main": "export { default } from './{{ name }}';",
    "component/index/styles": (
        "export { default as {{ name }}Styles } from './{{ name }}.module.css';"
    ),
    "component/index/types": "export type { {{ name }}Props } from './{{ name }}.types';",
    "component/styles/root": ".root {\n}",
    "component/types/props": (
        "export interface {{ name }}Props {\n"
        "  // Define your component's props here\n"
        "}"
    ),
    "component/main/import_react": "import React from 'react';",
    "component/main/import_styles": "import styles from './{{ name }}.module.css';",
    "component/main/import_types": "import type { {{ name }}Props } from './{{ name }}.types';",
    "component/main/inline_props": (
        "interface {{ name }}Props {\n"
        "  // Define your component's props here\n"
        "}"
    ),
    "component/main/body_styled": (
        "const {{ name }}: React.FC<{{ name }}Props> = () => {\n"
        "  return (\n"
        "    <div className={styles.root}>\n"
        "      <h1>{{ name }}</h1>\n"
        "    </div>\n"
        "  );\n"
        "};"
    ),
    "component/main/body_plain": (
        "const {{ name }}: React.FC<{{ name }}Props> = () => {\n"
        "  return (\n"
        "    <div>\n"
        "      <h1>{{ name }}</h1>\n"
        "    </div>\n"
        "  );\n"
        "};"
    ),
    "component/main/export": "export default {{ name }};",
}


# ---------------------------------------------------------------------------
# Context
# ---------------------------------------------------------------------------

CONTEXT_FRAGMENTS: dict[str, str] = {
    "context/index/main": (
        "export { default } from './{{ name }}Context';\n"
        "export * from './{{ name }}Context';"
    ),
    "context/index/types": "export * from './{{ name }}Context.types';",
    "context/types/state": (
        "export interface {{ name }}State {\n"
        "  // Define your state shape here\n"
        "}"
    ),
    "context/types/value": (
        "export interface {{ name }}ContextValue extends {{ name }}State {\n"
        "  setState: Dispatch<SetStateAction<{{ name }}State>>;\n"
        "}"
    ),
    "context/types/import_react": "import type { Dispatch, SetStateAction } from 'react';",
    "context/main/import_react": (
        "import React, { createContext, useContext, useState } from 'react';\n"
        "import type { ReactNode } from 'react';"
    ),
    "context/main/import_react_inline": (
        "import React, { createContext, useContext, useState } from 'react';\n"
        "import type { Dispatch, ReactNode, SetStateAction } from 'react';"
    ),
    "context/main/import_types": (
        "import type { {{ name }}State, {{ name }}ContextValue } "
        "from './{{ name }}Context.types';"
    ),
    "context/main/initial_state": "const initialState: {{ name }}State = {};",
    "context/main/context": (
        "const {{ name }}Context = createContext<{{ name }}ContextValue | undefined>(undefined);"
    ),
    "context/main/provider": (
        "export const {{ name }}Provider = ({ children }: { children: ReactNode }) => {\n"
        "  const [state, setState] = useState<{{ name }}State>(initialState);\n"
        "\n"
        "  return (\n"
        "    <{{ name }}Context.Provider value={{ '{{' }} ...state, setState {{ '}}' }}>\n"
        "      {children}\n"
        "    </{{ name }}Context.Provider>\n"
        "  );\n"
        "};"
    ),
    "context/main/accessor": (
        "export const use{{ name }} = (): {{ name }}ContextValue => {\n"
        "  const context = useContext({{ name }}Context);\n"
        "  if (context === undefined) {\n"
        "    throw new Error('use{{ name }} must be used within a {{ name }}Provider');\n"
        "  }\n"
        "  return context;\n"
        "};"
    ),
    "context/main/export": "export default {{ name }}Context;",
}


# ---------------------------------------------------------------------------
# Hook
# ---------------------------------------------------------------------------

HOOK_FRAGMENTS: dict[str, str] = {
    "hook/index/main": (
        "export { default } from './{{ name | hook_name }}';\n"
        "export * from './{{ name | hook_name }}';"
    ),
    "hook/index/types": "export * from './{{ name | hook_name }}.types';",
    "hook/types/options": (
        "export interface {{ name | hook_name }}Options {\n"
        "  // Define your hook's options here\n"
        "}"
    ),
    "hook/types/return": (
        "export interface {{ name | hook_name }}Return {\n"
        "  // Define your hook's return value here\n"
        "}"
    ),
    "hook/main/import_types": (
        "import type { {{ name | hook_name }}Options, {{ name | hook_name }}Return } "
        "from './{{ name | hook_name }}.types';"
    ),
    "hook/main/body_typed": (
        "export function {{ name | hook_name }}("
        "options: {{ name | hook_name }}Options = {}"
        "): {{ name | hook_name }}Return {\n"
        "  // Implement your hook logic here\n"
        "  return {};\n"
        "}"
    ),
    "hook/main/body_untyped": (
        "export function {{ name | hook_name }}(options = {}) {\n"
        "  // Implement your hook logic here\n"
        "  return {};\n"
        "}"
    ),
    "hook/main/export": "export default {{ name | hook_name }};",
}


FRAGMENTS: dict[str, str] = {
    **COMPONENT_FRAGMENTS,
    **CONTEXT_FRAGMENTS,
    **HOOK_FRAGMENTS,
}
