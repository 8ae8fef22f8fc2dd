#!/usr/bin/env python
"""
Ansible Action Plugin for security integration option validation

This plugin validates CREATE/ALTER/DROP/DESCRIBE/SHOW options for security
integrations using secint-sanity before a playbook sends them to the platform.

Example usage:
  - name: Validate SCIM integration change
    security_integration_validate:
      kind: alter-scim
      options:
        name: MY_SCIM
        set:
          enabled: true
    register: validation_result
"""

import json

from ansible.plugins.action import ActionBase

try:
    from secint_sanity.errors import OptionsLoadError
    from secint_sanity.loader import options_from_dict
    from secint_sanity.validator import OptionsValidator
    HAS_SECINT_SANITY = True
except ImportError:
    HAS_SECINT_SANITY = False


class ActionModule(ActionBase):
    """Ansible action plugin for security integration option validation."""

    def run(self, tmp=None, task_vars=None):
        """Execute the validation action."""
        if task_vars is None:
            task_vars = dict()

        result = super(ActionModule, self).run(tmp, task_vars)
        del tmp  # tmp no longer has any effect

        if not HAS_SECINT_SANITY:
            result['failed'] = True
            result['msg'] = (
                "secint-sanity is not installed. "
                "Install it with: pip install secint-sanity"
            )
            return result

        options = self._task.args.get('options', None)
        kind = self._task.args.get('kind', None)
        file_path = self._task.args.get('file', None)

        if options is None and file_path is None:
            result['failed'] = True
            result['msg'] = "Either 'options' or 'file' parameter must be provided"
            return result

        if options is not None and file_path is not None:
            result['failed'] = True
            result['msg'] = "Cannot specify both 'options' and 'file' parameters"
            return result

        if file_path:
            try:
                with open(file_path, 'r') as f:
                    options = json.load(f)
            except FileNotFoundError:
                result['failed'] = True
                result['msg'] = f"File not found: {file_path}"
                return result
            except json.JSONDecodeError as e:
                result['failed'] = True
                result['msg'] = f"Invalid JSON in file {file_path}: {e}"
                return result
        elif isinstance(options, str):
            try:
                options = json.loads(options)
            except json.JSONDecodeError as e:
                result['failed'] = True
                result['msg'] = f"Invalid JSON in options: {e}"
                return result

        try:
            built = options_from_dict(options, kind)
        except OptionsLoadError as e:
            result['failed'] = True
            result['msg'] = str(e)
            return result

        is_valid, violations = OptionsValidator().validate(built)

        result['valid'] = is_valid
        result['changed'] = False
        result['errors'] = [v.to_dict() for v in violations]

        if is_valid:
            result['msg'] = "Security integration options are valid"
        else:
            result['msg'] = f"Validation failed with {len(violations)} error(s)"
            if self._task.args.get('fail_on_error', True):
                result['failed'] = True
                result['msg'] = "Validation failed:\n" + "\n".join(f"  - {v}" for v in violations)

        return result
