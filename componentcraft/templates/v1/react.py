"""
React + TypeScript component templates for v1.

Each function returns a raw skeleton with ``{name}`` and ``{lower_name}``
placeholders. Literal braces in the TSX output are doubled so the
skeletons can be rendered with ``str.format_map``.
"""

from __future__ import annotations


DEFAULT_COLOR = "#6366F1"
DISABLED_COLOR = "#E5E7EB"
STORY_ACCENT_COLOR = "#10B981"


def component_template_v1() -> str:
    """Skeleton for the component definition (``<Name>.tsx``)."""
    return (
        "import React from 'react';\n"
        "\n"
        "/**\n"
        " * Props for the {name} component\n"
        " */\n"
        "export interface {name}Props {{\n"
        "  /** Content rendered inside the component */\n"
        "  children: React.ReactNode;\n"
        "  /** Additional class names */\n"
        "  className?: string;\n"
        "  /** Whether the component is disabled */\n"
        "  disabled?: boolean;\n"
        "  /** Custom theme color */\n"
        "  color?: string;\n"
        "  /** Click handler */\n"
        "  onClick?: () => void;\n"
        "  /** Any other HTML button attributes */\n"
        "  [key: string]: any;\n"
        "}}\n"
        "\n"
        "/**\n"
        " * {name} component\n"
        " */\n"
        "const {name}: React.FC<{name}Props> = ({{\n"
        "  children,\n"
        "  className = '',\n"
        "  disabled = false,\n"
        f"  color = '{DEFAULT_COLOR}',\n"
        "  onClick,\n"
        "  ...rest\n"
        "}}) => {{\n"
        "  return (\n"
        "    <button\n"
        "      className={{`{lower_name} ${{disabled ? 'disabled' : ''}} ${{className}}`}}\n"
        "      style={{{{\n"
        f"        backgroundColor: disabled ? '{DISABLED_COLOR}' : color,\n"
        "        padding: '12px 16px',\n"
        "        borderRadius: '8px',\n"
        "        border: 'none',\n"
        "        color: '#FFFFFF',\n"
        "        fontSize: '16px',\n"
        "        fontWeight: '600',\n"
        "        cursor: disabled ? 'not-allowed' : 'pointer',\n"
        "        opacity: disabled ? 0.6 : 1,\n"
        "        transition: 'all 0.2s ease',\n"
        "        boxShadow: '0 2px 4px rgba(0, 0, 0, 0.1)',\n"
        "      }}}}\n"
        "      disabled={{disabled}}\n"
        "      onClick={{onClick}}\n"
        "      {{...rest}}\n"
        "    >\n"
        "      {{children}}\n"
        "    </button>\n"
        "  );\n"
        "}};\n"
        "\n"
        "export default {name};\n"
    )


def unit_test_template_v1() -> str:
    """Skeleton for the Jest + Testing Library suite (``<Name>.test.tsx``)."""
    return (
        "import React from 'react';\n"
        "import {{ render, screen, fireEvent }} from '@testing-library/react';\n"
        "import {name} from './{name}';\n"
        "\n"
        "describe('{name} component', () => {{\n"
        "  test('renders its content', () => {{\n"
        "    const testText = 'Test {name}';\n"
        "    render(<{name}>{{testText}}</{name}>);\n"
        "\n"
        "    const componentText = screen.getByText(testText);\n"
        "    expect(componentText).toBeTruthy();\n"
        "  }});\n"
        "\n"
        "  test('applies a custom color', () => {{\n"
        "    const customColor = '#FF0000';\n"
        "    render(\n"
        "      <{name} color={{customColor}}>\n"
        "        Custom style\n"
        "      </{name}>\n"
        "    );\n"
        "\n"
        "    const component = screen.getByText('Custom style');\n"
        "    expect(component).toHaveStyle({{ backgroundColor: customColor }});\n"
        "  }});\n"
        "\n"
        "  test('calls onClick when clicked', () => {{\n"
        "    const onClick = jest.fn();\n"
        "    render(\n"
        "      <{name} onClick={{onClick}}>\n"
        "        Click test\n"
        "      </{name}>\n"
        "    );\n"
        "\n"
        "    const component = screen.getByText('Click test');\n"
        "    fireEvent.click(component);\n"
        "\n"
        "    expect(onClick).toHaveBeenCalledTimes(1);\n"
        "  }});\n"
        "\n"
        "  test('does not call onClick when disabled', () => {{\n"
        "    const onClick = jest.fn();\n"
        "    render(\n"
        "      <{name} disabled onClick={{onClick}}>\n"
        "        Disabled test\n"
        "      </{name}>\n"
        "    );\n"
        "\n"
        "    const component = screen.getByText('Disabled test');\n"
        "    fireEvent.click(component);\n"
        "\n"
        "    expect(onClick).not.toHaveBeenCalled();\n"
        "    expect(component).toHaveAttribute('disabled');\n"
        "    expect(component).toHaveStyle({{ opacity: 0.6 }});\n"
        "  }});\n"
        "\n"
        "  test('accepts a custom className', () => {{\n"
        "    const customClass = 'custom-class';\n"
        "    render(\n"
        "      <{name} className={{customClass}}>\n"
        "        Custom className\n"
        "      </{name}>\n"
        "    );\n"
        "\n"
        "    const component = screen.getByText('Custom className');\n"
        "    expect(component).toHaveClass(customClass);\n"
        "  }});\n"
        "}});\n"
    )


def story_template_v1() -> str:
    """Skeleton for the Storybook stories (``<Name>.stories.tsx``)."""
    return (
        "import React from 'react';\n"
        "import {{ Meta, StoryFn }} from '@storybook/react';\n"
        "import {name}, {{ {name}Props }} from './{name}';\n"
        "\n"
        "const meta: Meta<{name}Props> = {{\n"
        "  title: '{name}',\n"
        "  component: {name},\n"
        "  argTypes: {{\n"
        "    color: {{\n"
        "      control: {{\n"
        "        type: 'color',\n"
        "      }},\n"
        "    }},\n"
        "    disabled: {{\n"
        "      control: {{\n"
        "        type: 'boolean',\n"
        "      }},\n"
        "    }},\n"
        "    onClick: {{\n"
        "      action: 'clicked',\n"
        "    }},\n"
        "  }},\n"
        "}};\n"
        "\n"
        "export default meta;\n"
        "\n"
        "type {name}StoryProps = {name}Props;\n"
        "\n"
        "const Template: StoryFn<{name}StoryProps> = (args) => <{name} {{...args}} />;\n"
        "\n"
        "export const Default = Template.bind({{}});\n"
        "Default.args = {{\n"
        "  children: '{name}',\n"
        "}};\n"
        "\n"
        "export const CustomColor = Template.bind({{}});\n"
        "CustomColor.args = {{\n"
        "  children: 'Custom color',\n"
        f"  color: '{STORY_ACCENT_COLOR}',\n"
        "}};\n"
        "\n"
        "export const Disabled = Template.bind({{}});\n"
        "Disabled.args = {{\n"
        "  children: 'Disabled',\n"
        "  disabled: true,\n"
        "}};\n"
        "\n"
        "export const Large = Template.bind({{}});\n"
        "Large.args = {{\n"
        "  children: 'Large {name}',\n"
        "  style: {{\n"
        "    padding: '16px 24px',\n"
        "    fontSize: '18px',\n"
        "  }},\n"
        "}};\n"
    )
