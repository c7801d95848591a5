#!/usr/bin/env python3

import aws_cdk as cdk

from skyflow_stack import SkyflowStack

app = cdk.App()
SkyflowStack(
    app,
    "SkyflowStack",
)

app.synth()
