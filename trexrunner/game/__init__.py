"""The runner game's entities and its main stage."""