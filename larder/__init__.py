"""Recipe tooling for the larder community site."""
