'''Components parameterizing the allocation methods, such as divisors.'''
