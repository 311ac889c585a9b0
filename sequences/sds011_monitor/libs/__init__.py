"""Protocol libraries bundled with the SDS011 monitor sequence."""
