"""A small 2D game engine: geometry, spritesheets, sprites, entities, stages, events, window, audio and the game loop."""