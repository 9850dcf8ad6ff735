# Utils package for the gift shop backend
