"""CDK constructs for static websites hosted in AWS China regions."""
