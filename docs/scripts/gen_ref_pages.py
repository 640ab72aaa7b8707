#!/usr/bin/env python3
"""Generate API reference documentation for lib-result."""

import ast
from pathlib import Path

import mkdocs_gen_files

nav = mkdocs_gen_files.Nav()
root = Path(__file__).parent.parent.parent
package_name = 'lib_result'
src = root / 'src' / package_name


def get_module_description(module_path: Path) -> str:
    """Extract the first line of a module docstring."""
    try:
        tree = ast.parse(module_path.read_text(encoding='utf-8'))
    except (OSError, SyntaxError):
        return f'Module {module_path.stem}'
    docstring = ast.get_docstring(tree)
    if not docstring:
        return f'Module {module_path.stem}'
    return ' '.join(docstring.splitlines()[0].split())


# Public submodules only; _ prefixed modules are private by convention
public_modules = [
    path for path in sorted(src.glob('*.py')) if not path.name.startswith('_')
]

with mkdocs_gen_files.open('reference/index.md', 'w') as index:
    index.write('# API Reference\n\n')
    index.write(f'{get_module_description(src / "__init__.py")}\n\n')
    index.write(f'::: {package_name}\n')
    index.write('    options:\n')
    index.write('      show_submodules: false\n\n')
    index.write('| Module | Description |\n')
    index.write('|--------|-------------|\n')
    for path in public_modules:
        index.write(f'| [{path.stem}]({path.stem}.md) | {get_module_description(path)} |\n')

nav['reference'] = 'index.md'

for path in public_modules:
    doc_path = Path('reference', f'{path.stem}.md')
    ident = f'{package_name}.{path.stem}'

    with mkdocs_gen_files.open(doc_path, 'w') as fd:
        fd.write(f'# `{ident}`\n\n')
        fd.write(f'::: {ident}\n')
        fd.write('    options:\n')
        fd.write('      members: true\n')
        fd.write('      show_source: true\n\n')

    mkdocs_gen_files.set_edit_path(doc_path, path)
    nav['reference', path.stem] = f'{path.stem}.md'

with mkdocs_gen_files.open('reference/SUMMARY.md', 'w') as nav_file:
    nav_file.writelines(nav.build_literate_nav())
