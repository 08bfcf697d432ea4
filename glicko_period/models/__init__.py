"""data model of a rating period: rating states, matches and players"""
