# coding=utf-8
# pylint: disable=missing-module-docstring

from knack.help_files import helps  # pylint: disable=unused-import

helps[
    "token"
] = """
    type: group
    short-summary: Commands to acquire access tokens.
"""

helps[
    "token get"
] = """
    type: command
    short-summary: Get an access token using the configured authentication strategy.
    long-summary: >
        With auth.type set to 'msi' the token is requested from the local managed
        identity endpoint on msi.port. With auth.type set to 'token' the configured
        auth.access_token is returned.
    examples:
        - name: Get a token for Azure Resource Manager from the managed identity endpoint.
          text: armcli token get --resource https://management.core.windows.net/ --msi-port 50342
"""

helps[
    "rest"
] = """
    type: command
    short-summary: Invoke a custom request against Azure Resource Manager.
    long-summary: >
        The request carries the armcli user agent and a bearer token obtained with
        the configured authentication strategy.
    examples:
        - name: List resource groups.
          text: armcli rest --method get --url "/subscriptions/{subscriptionId}/resourcegroups?api-version=2021-04-01"
"""

helps[
    "version"
] = """
    type: command
    short-summary: Show the version and platform details sent in the user agent.
"""
